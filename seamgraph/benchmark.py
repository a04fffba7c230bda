"""
Timing comparison of seam finders on one picture.
"""

import logging
import time
from typing import Dict, List, Mapping, Optional, Tuple

from .energy import EnergyFunction
from .finders import make_seam_finder
from .picture import Picture
from .seam import SeamFinder, seam_cost

logger = logging.getLogger(__name__)


def default_seam_finders() -> Dict[str, SeamFinder]:
    """DP plus every graph representation x solver combination."""
    finders = {'dp': make_seam_finder('dp')}
    for method in ('generative', 'adjacency'):
        for solver in ('dijkstra', 'toposort'):
            finders[f'{method}-{solver}'] = make_seam_finder(method, solver=solver)
    return finders


def time_seam_finder(finder: SeamFinder, picture: Picture, f: EnergyFunction,
                     repeats: int = 3) -> Tuple[float, List[int]]:
    """
    Best-of-`repeats` wall time of one finder.

    Returns:
        (seconds, seam) where seam comes from the last run
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")
    best = float('inf')
    seam: List[int] = []
    for _ in range(repeats):
        start = time.perf_counter()
        seam = finder.find_seam(picture, f)
        best = min(best, time.perf_counter() - start)
    return best, seam


def compare_seam_finders(picture: Picture, f: EnergyFunction,
                         finders: Optional[Mapping[str, SeamFinder]] = None,
                         repeats: int = 3) -> Dict[str, dict]:
    """
    Run each finder on the same picture and energy function.

    Args:
        picture: Input picture
        f: Energy function
        finders: name -> SeamFinder (defaults to default_seam_finders())
        repeats: Runs per finder; the fastest is kept

    Returns:
        name -> {'seconds': float, 'seam': List[int], 'cost': float}
    """
    if finders is None:
        finders = default_seam_finders()

    results = {}
    for name, finder in finders.items():
        seconds, seam = time_seam_finder(finder, picture, f, repeats=repeats)
        cost = seam_cost(picture, f, seam)
        logger.info("%s: %.4fs, seam cost %.4f", name, seconds, cost)
        results[name] = {'seconds': seconds, 'seam': seam, 'cost': cost}
    return results

"""
Energy functions for seam finding.

An energy function is any callable `(picture, x, y) -> float` returning a
non-negative cost for one pixel. Low-energy seams are preferred.

The gradient energy here is the Sobel gradient magnitude (L1 norm of the
x and y gradients, Avidan & Shamir 2007) computed for the whole picture in
one convolution, then looked up per pixel.
"""

import torch
import torch.nn.functional as F
from typing import Optional, Protocol

from .picture import Picture


class EnergyFunction(Protocol):
    def __call__(self, picture: Picture, x: int, y: int) -> float:
        ...


def _to_gray(image: torch.Tensor) -> torch.Tensor:
    """(C, H, W) or (H, W) -> (H, W) luminance."""
    if not image.is_floating_point():
        image = image.float()
    if image.dim() == 2:
        return image
    if image.shape[0] == 3:
        return 0.299 * image[0] + 0.587 * image[1] + 0.114 * image[2]
    return image.mean(dim=0)


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    E(i, j) = |dI/dx (i, j)| + |dI/dy (i, j)|, with Sobel kernels and zero
    padding at the border.

    Args:
        image: RGB image tensor (C, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W)
    """
    gray = _to_gray(image).unsqueeze(0).unsqueeze(0)

    sobel_x = torch.tensor([[-1, 0, 1],
                           [-2, 0, 2],
                           [-1, 0, 1]], dtype=gray.dtype, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)

    sobel_y = torch.tensor([[-1, -2, -1],
                           [ 0,  0,  0],
                           [ 1,  2,  1]], dtype=gray.dtype, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    grad_x = F.conv2d(gray, sobel_x, padding=1)
    grad_y = F.conv2d(gray, sobel_y, padding=1)

    energy = torch.abs(grad_x) + torch.abs(grad_y)
    return energy[0, 0]


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to the [0, 1] range.

    Monotonic, so seam positions are unchanged.

    Args:
        energy: Energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized energy map in [0, 1]
    """
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)


class GradientEnergyFunction:
    """
    Per-pixel lookup into a gradient magnitude energy map.

    The map for the most recent picture is kept, so repeated calls during
    one graph traversal cost one convolution in total.

    Args:
        normalize: Remap the energy map to [0, 1] before lookups
    """

    def __init__(self, normalize: bool = False):
        self.normalize = normalize
        self._picture: Optional[Picture] = None
        self._energy: Optional[torch.Tensor] = None

    def energy_map(self, picture: Picture) -> torch.Tensor:
        if picture is not self._picture:
            energy = gradient_magnitude_energy(picture.tensor)
            if self.normalize:
                energy = normalize_energy(energy)
            self._picture, self._energy = picture, energy
        return self._energy

    def __call__(self, picture: Picture, x: int, y: int) -> float:
        return float(self.energy_map(picture)[y, x])


def intensity_energy(picture: Picture, x: int, y: int) -> float:
    """Energy equal to the pixel's mean channel value."""
    return float(picture.get(x, y).float().mean())

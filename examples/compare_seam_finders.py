"""
Compare seam finders on a real or synthetic image.

Times dynamic programming against the graph-based finders (generative vs
adjacency-list graph, Dijkstra vs toposort solver), checks they agree on
the seam cost, and saves a bar chart of the timings plus the image with
the DP seam drawn on it.

Usage:
    python compare_seam_finders.py [image_path] [--size 60] [--repeats 3]
"""

import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import numpy as np
from PIL import Image
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from seamgraph.picture import Picture
from seamgraph.energy import GradientEnergyFunction
from seamgraph.benchmark import compare_seam_finders


def load_image(path: str, size: int) -> torch.Tensor:
    """Load image, shrink so the longer side is `size`, convert to (C, H, W)."""
    img = Image.open(path).convert('RGB')
    img.thumbnail((size, size))
    img_array = np.array(img, dtype=np.float32) / 255.0
    return torch.from_numpy(img_array).permute(2, 0, 1)


def synthetic_image(size: int) -> torch.Tensor:
    """Two bright discs on a noisy background."""
    torch.manual_seed(0)
    H, W = size * 2 // 3, size
    yy, xx = torch.meshgrid(torch.arange(H, dtype=torch.float32),
                            torch.arange(W, dtype=torch.float32), indexing='ij')
    image = 0.1 * torch.rand(3, H, W)
    for cx, cy, r in [(W * 0.3, H * 0.4, H * 0.2), (W * 0.7, H * 0.6, H * 0.25)]:
        inside = ((xx - cx) ** 2 + (yy - cy) ** 2) <= r ** 2
        image[:, inside] = 0.9
    return image


def save_with_seam(image: torch.Tensor, seam, path: str):
    """Save image with the vertical seam (row per column) drawn in red."""
    img_vis = image.clone()
    for x, y in enumerate(seam):
        img_vis[:, y, x] = torch.tensor([1.0, 0.0, 0.0])
    img_array = (img_vis.permute(1, 2, 0).numpy() * 255).clip(0, 255).astype(np.uint8)
    Image.fromarray(img_array).save(path)
    print(f"Saved: {path}")


def plot_timings(results, path: str):
    names = list(results)
    seconds = [results[name]['seconds'] for name in names]

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.barh(names, seconds, color='steelblue')
    ax.set_xlabel('Best wall time (s)')
    ax.set_title('Seam finder comparison')
    ax.invert_yaxis()
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    print(f"Saved: {path}")


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument('image', nargs='?', help='Image path (synthetic image if omitted)')
    parser.add_argument('--size', type=int, default=60, help='Longer image side in pixels')
    parser.add_argument('--repeats', type=int, default=3)
    parser.add_argument('--output', default='output')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')
    os.makedirs(args.output, exist_ok=True)

    image = load_image(args.image, args.size) if args.image else synthetic_image(args.size)
    picture = Picture(image)
    print(f"Picture: {picture.width()}x{picture.height()}")

    results = compare_seam_finders(picture, GradientEnergyFunction(normalize=True),
                                   repeats=args.repeats)

    print("\n" + "=" * 60)
    for name, record in sorted(results.items(), key=lambda kv: kv[1]['seconds']):
        print(f"  {name:<22} {record['seconds']:8.4f}s   cost {record['cost']:.4f}")
    print("=" * 60)

    costs = [record['cost'] for record in results.values()]
    if max(costs) - min(costs) > 1e-6:
        print("WARNING: finders disagree on the minimum seam cost")

    save_with_seam(image, results['dp']['seam'], os.path.join(args.output, 'seam.png'))
    plot_timings(results, os.path.join(args.output, 'seam_finder_timings.png'))


if __name__ == '__main__':
    main()

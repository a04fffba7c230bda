"""
Read-only picture wrapper.

Pixels live in a torch tensor laid out like the rest of the image code:
(C, H, W) for colour or (H, W) for grayscale. Coordinates are (x, y) with
x indexing columns and y indexing rows.
"""

import numpy as np
import torch
from typing import Union


class Picture:
    """
    A picture with width(), height() and per-pixel access.

    Args:
        image: Tensor or array of shape (C, H, W) or (H, W)
    """

    def __init__(self, image: Union[torch.Tensor, np.ndarray]):
        if isinstance(image, np.ndarray):
            image = torch.from_numpy(np.ascontiguousarray(image))
        image = torch.as_tensor(image)
        if image.dim() not in (2, 3):
            raise ValueError(f"Expected (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")
        self._image = image

    @property
    def tensor(self) -> torch.Tensor:
        return self._image

    @property
    def channels(self) -> int:
        return 1 if self._image.dim() == 2 else self._image.shape[0]

    def width(self) -> int:
        return self._image.shape[-1]

    def height(self) -> int:
        return self._image.shape[-2]

    def get(self, x: int, y: int) -> torch.Tensor:
        """Pixel at column x, row y: a 0-d tensor for grayscale, (C,) otherwise."""
        if not (0 <= x < self.width() and 0 <= y < self.height()):
            raise IndexError(f"({x}, {y}) outside {self.width()}x{self.height()} picture")
        return self._image[..., y, x]

    def __repr__(self) -> str:
        return f"Picture(width={self.width()}, height={self.height()}, channels={self.channels})"

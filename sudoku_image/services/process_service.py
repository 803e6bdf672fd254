from __future__ import annotations

from typing import List, Sequence

import numpy as np

from sudoku_image.services.rgb_codec import decode_array

BINARY_THRESHOLD = 128


class ProcessService:
    # ---------- Вспомогательные функции ----------
    def _apply_binary_mask(self, mask_bool: np.ndarray) -> List[List[bool]]:
        """
        Преобразует булеву маску numpy в матрицу bool (строки = высота).
        """
        return mask_bool.astype(bool).tolist()

    # ---------- Яркость и бинаризация ----------
    def luminance_map(self, grid: Sequence[Sequence[int]]) -> np.ndarray:
        """
        Яркость каждого пикселя в [0..255] (int64), та же формула, что в `rgb_codec.luminance`.
        """
        rgb = decode_array(grid).astype(np.float64)
        # same operand order as the scalar formula, rounding half up
        lum = rgb[..., 0] * 0.21 + rgb[..., 1] * 0.71 + rgb[..., 2] * 0.08
        return np.floor(lum + 0.5).astype(np.int64)

    def binarize(self, grid: Sequence[Sequence[int]], threshold: int = BINARY_THRESHOLD) -> List[List[bool]]:
        """
        Пиксели с яркостью >= threshold (по умолчанию 50%) становятся True, остальные False.
        """
        return self._apply_binary_mask(self.luminance_map(grid) >= threshold)

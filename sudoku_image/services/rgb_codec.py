"""Кодирование цветов RGB в 32-битные целые и обратно.

Принципы:
- SRP: только арифметика упаковки/распаковки и проверка диапазонов.
- Чистые функции без состояния: удобно тестировать и переиспользовать.

Формат упакованного пикселя: 0xFFRRGGBB (альфа всегда 255).
"""
from __future__ import annotations

import math
import numbers
from typing import List, Sequence, Tuple

import numpy as np

ALPHA_OPAQUE = 0xFF000000


def valid_rgb_component(value: int) -> bool:
    """Проверяет, что значение подходит как компонента RGB: целое в [0..255]."""
    return isinstance(value, numbers.Integral) and 0 <= value <= 255


def valid_rgb(r: int, g: int, b: int) -> bool:
    """Проверяет, что все три компоненты лежат в [0..255]."""
    return valid_rgb_component(r) and valid_rgb_component(g) and valid_rgb_component(b)


def validate_rgb(r: int, g: int, b: int) -> None:
    """Бросает `ValueError`, если тройка не является корректным цветом RGB."""
    if not valid_rgb(r, g, b):
        raise ValueError(f"invalid RGB: {r}, {g}, {b}")


def encode_rgb(r: int, g: int, b: int) -> int:
    """Упаковывает RGB в целое 0xFFRRGGBB.

    Raises:
        ValueError: если хотя бы одна компонента вне [0..255].
    """
    validate_rgb(r, g, b)
    return ALPHA_OPAQUE | (r << 16) | (g << 8) | b


def decode_rgb(value: int) -> Tuple[int, int, int]:
    """Обратная операция к `encode_rgb`: возвращает (r, g, b).

    Проверка диапазона здесь формальная: байты по построению в [0..255],
    но внешние данные всё равно проверяются.
    """
    rgb = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    if not valid_rgb(*rgb):
        raise ValueError(f"Invalid value: {value}, resulted in {list(rgb)}")
    return rgb


def luminance(r: int, g: int, b: int) -> int:
    """Яркость цвета RGB в диапазоне [0..255].

    Округление «половина вверх», а не банковское `round()`.
    """
    validate_rgb(r, g, b)
    return int(math.floor(r * 0.21 + g * 0.71 + b * 0.08 + 0.5))


# ---------- Векторные варианты для целых матриц ----------
def encode_array(rgb: np.ndarray) -> List[List[int]]:
    """Упаковывает массив (H, W, 3) с каналами 0..255 в матрицу 0xFFRRGGBB."""
    channels = np.asarray(rgb, dtype=np.int64)
    packed = ALPHA_OPAQUE | (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]
    return packed.tolist()


def decode_array(grid: Sequence[Sequence[int]]) -> np.ndarray:
    """Раскладывает матрицу упакованных пикселей в массив (H, W, 3) uint8."""
    packed = np.asarray(grid, dtype=np.int64) & 0xFFFFFFFF
    return np.stack(
        ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF),
        axis=-1,
    ).astype(np.uint8)

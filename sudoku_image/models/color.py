"""Модель цвета RGB.

Принципы:
- Неизменяемость (`frozen=True`): цвет можно безопасно передавать и сравнивать.
- Проверка диапазона при создании, логики обработки изображений здесь нет.
"""
from __future__ import annotations

from dataclasses import dataclass

from sudoku_image.services.rgb_codec import validate_rgb


@dataclass(frozen=True)
class Color:
    """Цвет с тремя 8-битными каналами.

    Fields:
        r: Красный, 0..255.
        g: Зелёный, 0..255.
        b: Синий, 0..255.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        validate_rgb(self.r, self.g, self.b)

    def inverted(self) -> "Color":
        """Поканальная инверсия: (255 - r, 255 - g, 255 - b)."""
        return Color(255 - self.r, 255 - self.g, 255 - self.b)

"""Настройки рендеринга и записи изображений."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RenderSettings:
    """Параметры, общие для сервисов изображений и текста.

    Fields:
        font_candidates: Пути к TTF-шрифтам в порядке предпочтения (Arial первым).
        antialias: Сглаживание глифов при отрисовке текста.
        default_output_path: Куда пишет `ColorImage.write_img()` по умолчанию.
        formats: Допустимые форматы записи (сравнение с учётом регистра).
    """
    font_candidates: Tuple[str, ...] = (
        "arial.ttf",
        "/Library/Fonts/Arial.ttf",
        "C:/Windows/Fonts/arial.ttf",
        "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    )
    # the original renderer drew text without antialiasing hints
    antialias: bool = False
    default_output_path: str = "./output.png"
    formats: Tuple[str, ...] = ("gif", "jpg", "png")


DEFAULT_SETTINGS = RenderSettings()

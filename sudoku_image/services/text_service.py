"""Растеризация текстовых подписей через Pillow.

Принципы:
- SRP: сервис только рисует текст на отдельном холсте и возвращает пиксели;
  наложение на изображение делает `ColorImage`.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from sudoku_image.config import DEFAULT_SETTINGS, RenderSettings
from sudoku_image.models.color import Color
from sudoku_image.services.rgb_codec import encode_array

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _load_font(candidates: Tuple[str, ...], size: int) -> ImageFont.FreeTypeFont:
    for path in candidates:
        try:
            font = ImageFont.truetype(path, size)
        except OSError:
            continue
        logger.debug("using font %s at size %d", path, size)
        return font
    logger.debug("no TrueType candidate found, using Pillow default font at size %d", size)
    return ImageFont.load_default(size=size)


class TextService:
    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS

    def get_font(self, size: int) -> ImageFont.FreeTypeFont:
        return _load_font(self._settings.font_candidates, size)

    def text_origin(
        self, font: ImageFont.FreeTypeFont, text: str, text_x: int, text_y: int, centered: bool
    ) -> Tuple[int, int]:
        """Точка на базовой линии, от которой рисуется строка.

        Ширина и высота берутся из логических границ строки (advance и
        ascent + descent), а не из границ самих глифов. Вертикальная поправка
        `height - f // 2`, где `f = font_height - max_ascent + max_descent - leading`,
        у Pillow сводится к `ascent`: публичные метрики шрифта (`getmetrics`)
        не содержат межстрочного интервала, поэтому leading равен нулю.
        """
        ascent, descent = font.getmetrics()
        leading = 0
        font_height = ascent + descent + leading
        r_width = int(round(font.getlength(text)))
        r_height = font_height

        new_x = text_x - (r_width // 2 if centered else 0)
        new_y = text_y - (r_height // 2 if centered else 0)

        f_height = font_height - ascent + descent - leading
        return new_x, new_y + r_height - f_height // 2

    def render_text(
        self,
        width: int,
        height: int,
        background: Color,
        text_x: int,
        text_y: int,
        text: str,
        text_size: int,
        text_color: Color,
        centered: bool = False,
    ) -> List[List[int]]:
        """Рисует текст на холсте width x height, залитом цветом `background`.

        Args:
            width, height: Размер холста (совпадает с размером целевого изображения).
            background: Цвет заливки холста (цвет маски).
            text_x, text_y: Точка привязки текста.
            text: Строка.
            text_size: Размер шрифта, px.
            text_color: Цвет текста.
            centered: Центрировать строку относительно (text_x, text_y).

        Returns:
            Матрица пикселей 0xFFRRGGBB размером height x width.
        """
        canvas = Image.new("RGB", (width, height), color=(background.r, background.g, background.b))
        draw = ImageDraw.Draw(canvas)
        if not self._settings.antialias:
            draw.fontmode = "1"

        font = self.get_font(text_size)
        origin = self.text_origin(font, text, text_x, text_y, centered)
        draw.text(origin, text, fill=(text_color.r, text_color.g, text_color.b), font=font, anchor="ls")

        return encode_array(np.asarray(canvas, dtype=np.uint8))

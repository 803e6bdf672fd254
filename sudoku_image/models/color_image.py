"""Цветное изображение как матрица упакованных пикселей.

Принципы:
- Данные: число строк = высота (len(data)), длина строки = ширина (len(data[0])),
  цвет пикселя хранится как целое 0xFFRRGGBB.
- Работа с файлами и шрифтами делегирована сервисам, модель только хранит
  пиксели и накладывает на них результат.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from sudoku_image.config import DEFAULT_SETTINGS
from sudoku_image.models.color import Color
from sudoku_image.services.image_service import ImageService
from sudoku_image.services.process_service import ProcessService
from sudoku_image.services.rgb_codec import decode_rgb, encode_rgb
from sudoku_image.services.text_service import TextService


class ColorImage:
    """Изменяемый буфер пикселей фиксированного размера."""

    _image_service: ImageService = ImageService()
    _process_service: ProcessService = ProcessService()
    _text_service: TextService = TextService()

    def __init__(self, width: int, height: int, color: Optional[Color] = None) -> None:
        self._data: List[List[int]] = [[0] * width for _ in range(height)]
        if color is not None:
            for x in range(self.width):
                for y in range(self.height):
                    self.set_color(x, y, color)

    # ---- Constructors ----
    @classmethod
    def from_file(cls, file_path: str | Path) -> "ColorImage":
        """Загружает изображение из файла GIF/PNG/JPG.

        Raises:
            ValueError: если файла нет, это не файл или его не удалось декодировать.
        """
        return cls.from_grid(cls._image_service.read_color_image(file_path))

    @classmethod
    def from_grid(cls, data: List[List[int]]) -> "ColorImage":
        """Оборачивает готовую матрицу без копирования: изменения видны обеим сторонам."""
        image = cls.__new__(cls)
        image._data = data
        return image

    # ---- Public API ----
    @property
    def data(self) -> List[List[int]]:
        return self._data

    @property
    def width(self) -> int:
        return len(self._data[0])

    @property
    def height(self) -> int:
        return len(self._data)

    def _check_coordinates(self, x: int, y: int) -> None:
        # negative indices would wrap around to the opposite edge
        if x < 0 or y < 0:
            raise IndexError(f"pixel out of range: ({x}, {y})")

    def set_color(self, x: int, y: int, color: Color) -> None:
        self._check_coordinates(x, y)
        self._data[y][x] = encode_rgb(color.r, color.g, color.b)

    def get_color(self, x: int, y: int) -> Color:
        self._check_coordinates(x, y)
        r, g, b = decode_rgb(self._data[y][x])
        return Color(r, g, b)

    def copy_from(self, other: "ColorImage") -> None:
        """Копирует все пиксели `other` в те же координаты этого изображения."""
        for y in range(other.height):
            for x in range(other.width):
                self.set_color(x, y, other.get_color(x, y))

    def save(self, file_path: str | Path, fmt: str = "png") -> None:
        """Записывает изображение в файл; fmt: "gif", "jpg" или "png".

        Raises:
            ValueError: при неизвестном формате или ошибке записи.
        """
        self._image_service.write_image(self._data, file_path, fmt)

    def write_img(self, file_path: str | Path = DEFAULT_SETTINGS.default_output_path) -> None:
        self.save(file_path, "png")

    def to_binary(self) -> List[List[bool]]:
        """Бинарная матрица: True для пикселей с яркостью >= 50%."""
        return self._process_service.binarize(self._data)

    # ---- Text ----
    def draw_text(
        self,
        text_x: int,
        text_y: int,
        text: str,
        text_size: int,
        text_color: Color,
        centered: bool = False,
    ) -> None:
        """Накладывает текстовую подпись на изображение.

        Текст рисуется на отдельном холсте, залитом инверсией цвета текста
        (цвет маски). Копируются только пиксели, отличные от маски, так что
        фон изображения под подписью остаётся нетронутым. Пиксели глифа,
        совпавшие с цветом маски, тоже пропускаются.
        """
        mask_color = text_color.inverted()
        encoded_mask = encode_rgb(mask_color.r, mask_color.g, mask_color.b)

        rendered = self._text_service.render_text(
            self.width, self.height, mask_color, text_x, text_y, text, text_size, text_color, centered
        )

        for i, row in enumerate(rendered):
            for j, value in enumerate(row):
                if value != encoded_mask:
                    self._data[i][j] = value

    def draw_centered_text(self, text_x: int, text_y: int, text: str, text_size: int, text_color: Color) -> None:
        self.draw_text(text_x, text_y, text, text_size, text_color, centered=True)

    def __repr__(self) -> str:
        return f"ColorImage(width={self.width}, height={self.height})"

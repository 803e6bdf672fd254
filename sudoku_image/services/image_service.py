"""Чтение изображений с диска в матрицы пикселей и запись обратно.

Принципы:
- SRP: класс отвечает только за обмен с файлами через Pillow.
- Все ошибки (путь, кодек, формат) приходят к вызывающему как `ValueError`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
from PIL import Image

from sudoku_image.config import DEFAULT_SETTINGS, RenderSettings
from sudoku_image.services.process_service import ProcessService
from sudoku_image.services.rgb_codec import decode_array, encode_array

logger = logging.getLogger(__name__)

# format string accepted by save() -> Pillow format name
_PIL_FORMATS = {"gif": "GIF", "jpg": "JPEG", "png": "PNG"}


class ImageService:
    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._process_service = ProcessService()

    @staticmethod
    def validate_file(file_path: str | Path) -> Path:
        """Проверяет, что путь существует и указывает на обычный файл.

        Raises:
            ValueError: если файла нет или это не файл.
        """
        path = Path(file_path)
        if not path.exists():
            raise ValueError(f"file does not exist: {path}")
        if not path.is_file():
            raise ValueError(f"path does not represent a file: {path}")
        return path

    def _read_rgb(self, file_path: str | Path) -> np.ndarray:
        path = self.validate_file(file_path)
        try:
            with Image.open(path) as pil_image:
                # alpha is discarded, every pixel is treated as opaque
                rgb = np.asarray(pil_image.convert("RGB"), dtype=np.uint8)
        except (OSError, Image.DecompressionBombError) as exc:
            raise ValueError(str(exc)) from exc
        logger.debug("read %s: %dx%d", path, rgb.shape[1], rgb.shape[0])
        return rgb

    def read_color_image(self, file_path: str | Path) -> List[List[int]]:
        """Загружает GIF/PNG/JPG и возвращает матрицу пикселей 0xFFRRGGBB.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            Матрица: число строк = высота, длина строки = ширина.

        Raises:
            ValueError: если путь некорректен или файл не читается как изображение.
        """
        return encode_array(self._read_rgb(file_path))

    def read_binary_image(self, file_path: str | Path) -> List[List[bool]]:
        """Загружает изображение в бинарном виде: яркость >= 50% даёт True."""
        return self._process_service.binarize(self.read_color_image(file_path))

    def write_image(self, data: Sequence[Sequence[int]], file_path: str | Path, fmt: str) -> None:
        """Записывает матрицу пикселей 0xFFRRGGBB в файл формата gif, jpg или png.

        Raises:
            ValueError: при неизвестном формате или ошибке записи.
        """
        if fmt not in self._settings.formats:
            valid = ", ".join(self._settings.formats)
            raise ValueError(f"invalid format: {fmt} (valid values: {valid})")

        pil_image = Image.fromarray(decode_array(data))
        path = Path(file_path)
        try:
            pil_image.save(path, format=_PIL_FORMATS[fmt])
        except OSError as exc:
            raise ValueError(str(exc)) from exc
        logger.debug("wrote %s as %s: %dx%d", path, fmt, pil_image.width, pil_image.height)

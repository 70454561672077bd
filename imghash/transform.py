from enum import Enum
from typing import Tuple

import numpy as np
from PIL import Image


WIDE_GRAY_MODES = frozenset({'I', 'I;16', 'I;16L', 'I;16B', 'I;16N'})


class ColorSpace(Enum):
    REC601 = (0.299, 0.587, 0.114)
    REC709 = (0.2126, 0.7152, 0.0722)

    @property
    def coefficients(self) -> Tuple[float, float, float]:
        return self.value

    @classmethod
    def parse(cls, name: str) -> 'ColorSpace':
        key = name.strip().upper().replace('.', '').replace('-', '').replace('_', '')
        if not key.startswith('REC'):
            key = 'REC' + key
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f'unknown color space: {name!r}') from None


def grayscale(image: Image.Image, color_space: ColorSpace = ColorSpace.REC601) -> Image.Image:
    if image.mode in WIDE_GRAY_MODES:
        # 16 бит -> 8 бит масштабированием, convert('RGB') просто обрезал бы всё выше 255
        wide = np.asarray(image, dtype=np.float64)
        return Image.fromarray(np.clip(np.floor(wide / 257 + 0.5), 0, 255).astype(np.uint8))

    # альфа-канал игнорируется, палитра/CMYK/L приводятся к RGB средствами Pillow
    rgb = np.asarray(image.convert('RGB'), dtype=np.float64)
    luma = rgb @ np.asarray(color_space.coefficients, dtype=np.float64)
    # round half up
    luma = np.clip(np.floor(luma + 0.5), 0, 255).astype(np.uint8)
    return Image.fromarray(luma)


def convert(image: Image.Image, width: int, height: int, color_space: ColorSpace = ColorSpace.REC601) -> Image.Image:
    if width <= 0 or height <= 0:
        raise ValueError(f'target size must be positive, got {width}x{height}')
    # точное растяжение без сохранения пропорций, Lanczos (a=3)
    return grayscale(image, color_space).resize((width, height), Image.Resampling.LANCZOS)


def pixel_matrix(image: Image.Image) -> np.ndarray:
    return np.asarray(image, dtype=np.uint8).reshape(image.height, image.width)

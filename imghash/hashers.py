import dataclasses
import logging
from typing import Dict, Optional, Type

import numpy as np
from PIL import Image

from .bitmatrix import BitMatrixHash
from .config import HasherConfig
from .transform import ColorSpace, convert, pixel_matrix
from .utils.fileio import PathLike, download_image, open_image, open_image_bytes
from .utils.spectral import Axis, dct2_over_matrix
from .utils.stats import mean, median

logger = logging.getLogger(__name__)


class ImageHasher:
    """Base class: grayscale + resize, then a per-algorithm bit derivation.

    Keyword overrides are applied on top of ``config`` (or the defaults), e.g.
    ``AverageHasher(width=16, height=16)``.
    """

    name = ''

    def __init__(self, config: Optional[HasherConfig] = None, **overrides):
        config = config or HasherConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def color_space(self) -> ColorSpace:
        return self.config.color_space

    def _convert(self, image: Image.Image, width: int, height: int) -> np.ndarray:
        return pixel_matrix(convert(image, width, height, self.color_space))

    def _hash(self, image: Image.Image) -> BitMatrixHash:
        raise NotImplementedError

    def hash_from_image(self, image: Image.Image) -> BitMatrixHash:
        h = self._hash(image)
        logger.debug('%s hash %s (%dx%d, %s)', self.name, h, self.width, self.height, self.color_space.name)
        return h

    def hash_from_path(self, path: PathLike) -> BitMatrixHash:
        return self.hash_from_image(open_image(path))

    def hash_from_bytes(self, data: bytes) -> BitMatrixHash:
        return self.hash_from_image(open_image_bytes(data))

    def hash_from_url(self, url: str, timeout: Optional[float] = None) -> BitMatrixHash:
        return self.hash_from_bytes(download_image(url, timeout=timeout))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.config!r})'


class AverageHasher(ImageHasher):
    name = 'average'

    def _hash(self, image: Image.Image) -> BitMatrixHash:
        pixels = self._convert(image, self.width, self.height)
        return BitMatrixHash(pixels > mean(pixels), self.width, self.height)


class DifferenceHasher(ImageHasher):
    name = 'difference'

    def _hash(self, image: Image.Image) -> BitMatrixHash:
        # лишний столбец: width сравнений соседних пикселей на строку
        pixels = self._convert(image, self.width + 1, self.height)
        return BitMatrixHash(pixels[:, :-1] < pixels[:, 1:], self.width, self.height)


class MedianHasher(ImageHasher):
    name = 'median'

    def _hash(self, image: Image.Image) -> BitMatrixHash:
        pixels = self._convert(image, self.width, self.height)
        return BitMatrixHash(pixels > median(pixels), self.width, self.height)


class PerceptualHasher(ImageHasher):
    name = 'perceptual'

    @property
    def factor(self) -> int:
        return self.config.factor

    def _hash(self, image: Image.Image) -> BitMatrixHash:
        pixels = self._convert(image, self.width * self.factor, self.height * self.factor)
        # DCT по столбцам, затем по строкам
        dct = dct2_over_matrix(dct2_over_matrix(pixels, Axis.COLUMN), Axis.ROW)
        # низкие частоты - левый верхний угол
        low = dct[:self.height, :self.width]
        return BitMatrixHash(low > median(low), self.width, self.height)


HASHERS: Dict[str, Type[ImageHasher]] = {
    cls.name: cls for cls in (AverageHasher, DifferenceHasher, MedianHasher, PerceptualHasher)
}


def hasher_for(config: Optional[HasherConfig] = None, algorithm: str = 'perceptual') -> ImageHasher:
    try:
        cls = HASHERS[algorithm]
    except KeyError:
        raise ValueError(f'unknown algorithm {algorithm!r}, expected one of {sorted(HASHERS)}') from None
    return cls(config)


def hash_from_image(image: Image.Image, config: Optional[HasherConfig] = None, algorithm: str = 'perceptual') -> BitMatrixHash:
    return hasher_for(config, algorithm).hash_from_image(image)


def hash_from_path(path: PathLike, config: Optional[HasherConfig] = None, algorithm: str = 'perceptual') -> BitMatrixHash:
    return hasher_for(config, algorithm).hash_from_path(path)


def average_hash(path: PathLike, width: int = 8, height: int = 8, color_space: ColorSpace = ColorSpace.REC601) -> BitMatrixHash:
    return AverageHasher(width=width, height=height, color_space=color_space).hash_from_path(path)


def difference_hash(path: PathLike, width: int = 8, height: int = 8, color_space: ColorSpace = ColorSpace.REC601) -> BitMatrixHash:
    return DifferenceHasher(width=width, height=height, color_space=color_space).hash_from_path(path)


def median_hash(path: PathLike, width: int = 8, height: int = 8, color_space: ColorSpace = ColorSpace.REC601) -> BitMatrixHash:
    return MedianHasher(width=width, height=height, color_space=color_space).hash_from_path(path)


def perceptual_hash(path: PathLike, width: int = 8, height: int = 8, factor: int = 4,
                    color_space: ColorSpace = ColorSpace.REC601) -> BitMatrixHash:
    return PerceptualHasher(width=width, height=height, factor=factor, color_space=color_space).hash_from_path(path)

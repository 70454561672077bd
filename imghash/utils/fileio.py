import logging
import os
from io import BytesIO
from typing import Optional, Union

import requests
from PIL import Image

from ..config import http_timeout

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def open_image(path: PathLike) -> Image.Image:
    # FileNotFoundError / PIL.UnidentifiedImageError уходят вызывающему как есть
    with Image.open(path) as im:
        logger.debug('opened %s (%s, %dx%d)', path, im.mode, im.width, im.height)
        return im.copy()


def open_image_bytes(data: bytes) -> Image.Image:
    with Image.open(BytesIO(data)) as im:
        logger.debug('decoded %d bytes (%s, %dx%d)', len(data), im.mode, im.width, im.height)
        return im.copy()


def download_image(url: str, timeout: Optional[float] = None) -> bytes:
    if timeout is None:
        timeout = http_timeout()
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning('download of %s failed: %s', url, e)
        raise
    return r.content

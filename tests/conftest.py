import numpy as np
import pytest
from PIL import Image


def rgb_from_gray(gray: np.ndarray) -> Image.Image:
    return Image.fromarray(np.stack([gray] * 3, axis=-1).astype(np.uint8))


@pytest.fixture
def horizontal_gradient() -> Image.Image:
    # тёмный слева, светлый справа
    return rgb_from_gray(np.tile(np.arange(256, dtype=np.uint8), (64, 1)))


@pytest.fixture
def vertical_gradient() -> Image.Image:
    return rgb_from_gray(np.tile(np.arange(256, dtype=np.uint8).reshape(-1, 1), (1, 64)))


@pytest.fixture
def left_right_split() -> Image.Image:
    gray = np.zeros((128, 256), dtype=np.uint8)
    gray[:, 128:] = 255
    return rgb_from_gray(gray)


@pytest.fixture
def top_bottom_split() -> Image.Image:
    gray = np.zeros((256, 128), dtype=np.uint8)
    gray[128:, :] = 255
    return rgb_from_gray(gray)


@pytest.fixture
def smooth_image() -> Image.Image:
    rng = np.random.default_rng(7)
    small = rng.integers(0, 256, size=(8, 8, 3), dtype=np.uint8)
    return Image.fromarray(small).resize((256, 256), Image.Resampling.BICUBIC)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # переменные, которые выставит load_dotenv, будут удалены после теста;
    # .env ищется от cwd, поэтому уходим в пустой tmp_path
    monkeypatch.chdir(tmp_path)
    for name in ('IMGHASH_WIDTH', 'IMGHASH_HEIGHT', 'IMGHASH_FACTOR', 'IMGHASH_COLOR_SPACE', 'IMGHASH_HTTP_TIMEOUT'):
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch


def make_pattern_image(width: int, height: int) -> Image.Image:
    # при размере, равном целевому, Pillow не ресэмплирует - хеши считаются вручную
    y, x = np.mgrid[0:height, 0:width]
    return Image.fromarray(((x * x * 7 + y * 13 + x * y * 5 + 11) % 256).astype(np.uint8))


@pytest.fixture
def pattern_image():
    return make_pattern_image


@pytest.fixture
def wide_left_right_split() -> Image.Image:
    gray = np.zeros((128, 256), dtype=np.uint16)
    gray[:, 128:] = 65535
    return Image.fromarray(gray)

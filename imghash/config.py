import numbers
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .transform import ColorSpace

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8
DEFAULT_FACTOR = 4
DEFAULT_HTTP_TIMEOUT = 60  # секунды


def load_env(env_file: Optional[str] = None) -> bool:
    # .env ищется от текущего каталога, а не от каталога пакета;
    # уже заданные переменные окружения не перезаписываются
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
        if not env_file:
            return False
    return load_dotenv(dotenv_path=env_file)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


def http_timeout() -> int:
    load_env()
    return _int_env('IMGHASH_HTTP_TIMEOUT', DEFAULT_HTTP_TIMEOUT)


@dataclass(frozen=True)
class HasherConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    # только для perceptual: изображение масштабируется до (width*factor, height*factor)
    factor: int = DEFAULT_FACTOR
    color_space: ColorSpace = ColorSpace.REC601

    def __post_init__(self):
        for name in ('width', 'height', 'factor'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise ValueError(f'{name} must be an integer, got {value!r}')
            if value <= 0:
                raise ValueError(f'{name} must be positive, got {value}')
            # np.int64 и т.п. -> int
            object.__setattr__(self, name, int(value))
        if isinstance(self.color_space, str):
            object.__setattr__(self, 'color_space', ColorSpace.parse(self.color_space))
        elif not isinstance(self.color_space, ColorSpace):
            raise ValueError(f'color_space must be a ColorSpace, got {self.color_space!r}')

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'HasherConfig':
        load_env(env_file)
        color_space = os.getenv('IMGHASH_COLOR_SPACE')
        return cls(
            width=_int_env('IMGHASH_WIDTH', DEFAULT_WIDTH),
            height=_int_env('IMGHASH_HEIGHT', DEFAULT_HEIGHT),
            factor=_int_env('IMGHASH_FACTOR', DEFAULT_FACTOR),
            color_space=ColorSpace.parse(color_space) if color_space else ColorSpace.REC601,
        )

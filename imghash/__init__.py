from .bitmatrix import BitMatrixHash
from .config import HasherConfig
from .transform import ColorSpace, convert, grayscale
from .errors import (
    DimensionMismatchError,
    EmptyHashStringError,
    HashDecodeError,
    HashLengthError,
    HashShapeError,
    InvalidHexDigitError,
    ZeroDimensionError,
)
from .hashers import (
    HASHERS,
    AverageHasher,
    DifferenceHasher,
    ImageHasher,
    MedianHasher,
    PerceptualHasher,
    average_hash,
    difference_hash,
    hash_from_image,
    hash_from_path,
    hasher_for,
    median_hash,
    perceptual_hash,
)

__version__ = '0.1.0'

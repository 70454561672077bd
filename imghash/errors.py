class HashDecodeError(ValueError):
    """A hex string could not be turned back into a BitMatrixHash."""


class ZeroDimensionError(HashDecodeError):
    pass


class EmptyHashStringError(HashDecodeError):
    pass


class HashLengthError(HashDecodeError):
    pass


class InvalidHexDigitError(HashDecodeError):
    pass


class DimensionMismatchError(HashDecodeError):
    pass


class HashShapeError(ValueError):
    """Two hashes of different width/height were compared."""

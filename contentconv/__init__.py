from .normalizers import get_default_normalizer, normalize, ContentNormalizer
from .timing import delay
from .errors import (
    InvalidFormatError, InvalidInputTypeError, ParseFailure, UnparsableContentError,
)
from .logconfig import setup_logging

__all__ = [
    "normalize",
    "get_default_normalizer",
    "ContentNormalizer",
    "delay",
    "InvalidFormatError",
    "InvalidInputTypeError",
    "UnparsableContentError",
    "ParseFailure",
    "setup_logging",
]

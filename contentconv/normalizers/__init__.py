from .pipeline import get_default_normalizer, normalize, ContentNormalizer
from .parsers import JsonParser, YamlParser
from .types import (
    InputVariant, Invalid, Structured, StructuredPassthrough, TextCandidate, classify_input,
)
from .base import Normalizer, Parser

__all__ = [
    "get_default_normalizer",
    "normalize",
    "ContentNormalizer",
    "JsonParser",
    "YamlParser",
    "InputVariant",
    "Invalid",
    "Structured",
    "StructuredPassthrough",
    "TextCandidate",
    "classify_input",
    "Normalizer",
    "Parser",
]

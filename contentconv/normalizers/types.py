# contentconv/normalizers/types.py
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

# Whatever a JSON or YAML parser hands back: mapping, list, scalar or None
Structured = Any


@dataclass(frozen=True)
class TextCandidate:
    """A string that still has to be parsed."""
    text: str


@dataclass(frozen=True)
class StructuredPassthrough:
    """An already-decoded mapping. Returned as-is."""
    value: Mapping


@dataclass(frozen=True)
class Invalid:
    """Anything else (None, sequences, numbers, bools, bytes, objects)."""
    value: Any


InputVariant = Union[TextCandidate, StructuredPassthrough, Invalid]


def classify_input(value: Any) -> InputVariant:
    """
    Three-way split of normalizer input.
    Only str and Mapping are accepted. Lists, tuples and arbitrary
    objects are rejected the same way.
    """
    if isinstance(value, str):
        return TextCandidate(value)
    if isinstance(value, Mapping):
        return StructuredPassthrough(value)
    return Invalid(value)

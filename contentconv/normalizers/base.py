# contentconv/normalizers/base.py
from typing import Any, Protocol, Tuple, Type
from contentconv.errors import Format, ParseFailure
from .types import Structured

class Parser(Protocol):
    format: Format
    label: str
    errors: Tuple[Type[Exception], ...]  # exceptions meaning "not this format"

    def parse(self, text: str) -> Structured:
        ...

    def describe_failure(self, exc: Exception) -> ParseFailure:
        ...

class Normalizer(Protocol):
    def normalize(self, value: Any) -> Structured:
        """Return structured data for `value`. Do not mutate `value`."""
        ...

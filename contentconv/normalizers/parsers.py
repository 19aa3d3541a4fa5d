import json
from typing import Optional
import yaml
from .types import Structured
from . import yaml12
from contentconv.errors import ParseFailure

class JsonParser:
    """Strict JSON via the stdlib decoder."""
    format = "json"
    label = "JSON"
    errors = (ValueError,)  # JSONDecodeError, plus int digit-limit errors

    def parse(self, text: str) -> Structured:
        return json.loads(text)

    def describe_failure(self, exc: Exception) -> ParseFailure:
        return ParseFailure(
            format=self.format,
            label=self.label,
            message=str(exc),
            error_type=type(exc).__name__,
            line=getattr(exc, "lineno", None),
            column=getattr(exc, "colno", None),
        )


class YamlParser:
    """
    YAML 1.2 core schema on PyYAML's safe loader.
    Duplicate keys are rejected, and the stream must hold a single document.
    """
    format = "yaml"
    label = "YAML"
    errors = (yaml.YAMLError, ValueError)

    def parse(self, text: str) -> Structured:
        return yaml12.load(text)

    def describe_failure(self, exc: Exception) -> ParseFailure:
        line, column = yaml_position(exc)
        return ParseFailure(
            format=self.format,
            label=self.label,
            message=str(exc),
            error_type=type(exc).__name__,
            line=line,
            column=column,
        )


# --- helpers ---

def yaml_position(exc: Exception) -> tuple[Optional[int], Optional[int]]:
    """1-based (line, column) of a PyYAML error, or (None, None)."""
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None, None
    return mark.line + 1, mark.column + 1

# contentconv/errors.py
from typing import Any, List, Literal, Optional
from pydantic import BaseModel

Format = Literal["json", "yaml"]

PREFIX = "Invalid content format"


class ParseFailure(BaseModel):
    """One failed parse attempt, kept verbatim so callers can inspect it."""
    format: Format
    label: str                      # "JSON" | "YAML", used in messages
    message: str                    # str() of the parser exception
    error_type: str                 # parser exception class name
    line: Optional[int] = None      # 1-based, when the parser reports it
    column: Optional[int] = None


class InvalidFormatError(ValueError):
    """Base class: content could not be interpreted as structured data."""


class InvalidInputTypeError(InvalidFormatError):
    """Input was neither a string nor a mapping. Nothing was parsed."""
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{PREFIX}: Input must be a string or an object")


class UnparsableContentError(InvalidFormatError):
    """
    A string failed every parser stage.

    Holds one ParseFailure per stage, in the order the stages ran.
    The message lists each failure on its own labelled line:

        Invalid content format:
        JSON Parse Error: ...
        YAML Parse Error: ...
    """
    def __init__(self, failures: List[ParseFailure]):
        self.failures = list(failures)
        lines = [f"{f.label} Parse Error: {f.message}" for f in self.failures]
        super().__init__("\n".join([f"{PREFIX}:", *lines]))

    def failure_for(self, fmt: Format) -> Optional[ParseFailure]:
        return next((f for f in self.failures if f.format == fmt), None)

    @property
    def json_error(self) -> Optional[ParseFailure]:
        return self.failure_for("json")

    @property
    def yaml_error(self) -> Optional[ParseFailure]:
        return self.failure_for("yaml")

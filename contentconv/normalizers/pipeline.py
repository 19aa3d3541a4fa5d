import logging
from typing import Any, List, Sequence
from .base import Normalizer, Parser
from .types import Structured, TextCandidate, StructuredPassthrough, classify_input
from .parsers import JsonParser, YamlParser
from contentconv.errors import InvalidInputTypeError, ParseFailure, UnparsableContentError

log = logging.getLogger(__name__)

class ContentNormalizer(Normalizer):
    """
    A chain of parser stages.
    Strings go through each stage in order and the first one that
    succeeds wins. Mappings pass straight through untouched.
    """
    def __init__(self, stages: Sequence[Parser]):
        if not stages:
            raise ValueError("ContentNormalizer needs at least one parser stage")
        self.stages = tuple(stages)

    def normalize(self, value: Any) -> Structured:
        variant = classify_input(value)
        if isinstance(variant, StructuredPassthrough):
            # Already decoded upstream (e.g. by an HTTP client), hand it back
            return variant.value
        if not isinstance(variant, TextCandidate):
            raise InvalidInputTypeError(value)
        return self._parse_text(variant.text)

    def _parse_text(self, text: str) -> Structured:
        failures: List[ParseFailure] = []
        last_exc: Exception | None = None
        for stage in self.stages:
            try:
                return stage.parse(text)
            except stage.errors as e:
                failures.append(stage.describe_failure(e))
                last_exc = e
                log.debug("%s parse failed: %s", stage.label, e)

        log.debug("content rejected by all %d parser stages", len(self.stages))
        raise UnparsableContentError(failures) from last_exc


def get_default_normalizer() -> ContentNormalizer:
    """
    Factory for the default pipeline.
    JSON runs before YAML so strict JSON is never reread as looser YAML.
    """
    return ContentNormalizer([JsonParser(), YamlParser()])


_default = get_default_normalizer()

def normalize(value: Any) -> Structured:
    """
    Turn a JSON string, a YAML string, or an already-decoded mapping
    into structured data.

    Raises:
      InvalidInputTypeError  if `value` is not a str or a Mapping
      UnparsableContentError if the string is neither valid JSON nor valid YAML
    """
    return _default.normalize(value)

# contentconv/normalizers/yaml12.py
import re
import yaml
from yaml.constructor import ConstructorError

# --------------------------------------------------------------------
# YAML 1.2 core schema on top of PyYAML's safe loader
# --------------------------------------------------------------------
# PyYAML resolves plain scalars with YAML 1.1 rules (yes/on booleans,
# timestamps, sexagesimal ints, leading-zero octals). Only the 1.2 core
# types are resolved here; everything else stays a string.

NULL_RE  = re.compile(r"^(?:~|null|Null|NULL|)$")
BOOL_RE  = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
INT_RE   = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
FLOAT_RE = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.(?:inf|Inf|INF)"
    r"|\.(?:nan|NaN|NAN))$"
)


class Yaml12SafeLoader(yaml.SafeLoader):
    """
    Safe loader with YAML 1.2 core-schema scalars.
    Duplicate mapping keys are an error instead of last-one-wins.
    """
    yaml_implicit_resolvers: dict = {}

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            return super().construct_mapping(node, deep=deep)
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=True)
            try:
                duplicate = key in seen
            except TypeError:
                continue  # unhashable; the base constructor reports it
            if duplicate:
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found duplicate key {key!r}", key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)

    def construct_yaml_int(self, node):
        value = self.construct_scalar(node)
        if value.startswith(("0o", "0x")):
            return int(value, 0)
        return int(value)  # "012" is decimal 12 in 1.2


Yaml12SafeLoader.add_implicit_resolver("tag:yaml.org,2002:null", NULL_RE, ["~", "n", "N", ""])
Yaml12SafeLoader.add_implicit_resolver("tag:yaml.org,2002:bool", BOOL_RE, list("tTfF"))
Yaml12SafeLoader.add_implicit_resolver("tag:yaml.org,2002:int", INT_RE, list("-+0123456789"))
Yaml12SafeLoader.add_implicit_resolver("tag:yaml.org,2002:float", FLOAT_RE, list("-+0123456789."))
Yaml12SafeLoader.add_constructor("tag:yaml.org,2002:int", Yaml12SafeLoader.construct_yaml_int)


def load(text: str):
    """Single-document YAML 1.2 load. Raises yaml.YAMLError (or ValueError for oversized ints)."""
    return yaml.load(text, Loader=Yaml12SafeLoader)

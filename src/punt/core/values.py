"""Input classification.

Inputs are already-decoded data: the values produced by json.loads,
yaml.safe_load or a config loader. classify() is the single discriminated
entry point every leaf and structural parser dispatches through, so the set
of recognized shapes is closed and defined in one place.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from enum import StrEnum

__all__ = [
    "InputKind",
    "classify",
]


class InputKind(StrEnum):
    """Closed set of input shapes.

    Categories:
        NULL: None
        BOOLEAN: True / False
        INTEGER: int (never bool)
        FLOAT: float
        STRING: str
        LIST: list or tuple (ordered)
        MAP: any collections.abc.Mapping (keys are opaque)
        OTHER: anything else (bytes, sets, arbitrary objects)
    """

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    MAP = "map"
    OTHER = "other"


def classify(value: object) -> InputKind:
    """Classify an input value.

    bool is checked before int because ``bool`` subclasses ``int`` in
    Python; ``True`` is a boolean, not the integer 1.

    Args:
        value: Any decoded input

    Returns:
        The InputKind of the value

    Example:
        >>> classify(True)
        <InputKind.BOOLEAN: 'boolean'>
        >>> classify(1)
        <InputKind.INTEGER: 'integer'>
        >>> classify((1, 2))
        <InputKind.LIST: 'list'>
    """
    match value:
        case None:
            return InputKind.NULL
        case bool():
            return InputKind.BOOLEAN
        case int():
            return InputKind.INTEGER
        case float():
            return InputKind.FLOAT
        case str():
            return InputKind.STRING
        case list() | tuple():
            return InputKind.LIST
        case Mapping():
            return InputKind.MAP
        case _:
            return InputKind.OTHER

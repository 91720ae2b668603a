"""Key/value records stored in the hash table.

A ``Value`` is either ``Text`` or ``Number``. Both are frozen, so an
``Entry`` holding one never shares mutable state with the caller.
"""

from dataclasses import dataclass
from typing import Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


@dataclass(frozen=True)
class Text:
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Text payload must be str, got {type(self.text).__name__}")


@dataclass(frozen=True)
class Number:
    number: int

    def __post_init__(self):
        # bool is an int subclass but not a number payload
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(f"Number payload must be int, got {type(self.number).__name__}")
        if not INT64_MIN <= self.number <= INT64_MAX:
            raise ValueError(f"Number payload out of signed 64-bit range: {self.number}")


Value = Union[Text, Number]


def as_value(value) -> Value:
    """Wrap a plain ``str`` or ``int`` into its ``Value`` kind."""
    if isinstance(value, (Text, Number)):
        return value
    if isinstance(value, str):
        return Text(value)
    return Number(value)


def format_value(value: Value) -> str:
    if isinstance(value, Text):
        return value.text
    if isinstance(value, Number):
        return str(value.number)
    raise TypeError(f"Unknown value kind: {type(value).__name__}")


class Entry:
    """One key/value record in a bucket chain."""

    __slots__ = ("key", "value")

    def __init__(self, key: str, value: Value):
        if not isinstance(key, str):
            raise TypeError(f"Entry key must be str, got {type(key).__name__}")
        self.key = key
        self.value = as_value(value)

    def update(self, value: Value) -> None:
        self.value = as_value(value)

    def format(self) -> str:
        return f"{self.key}\t{format_value(self.value)}\n"

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"

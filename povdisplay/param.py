"""Typed, bounded parameters exposed by effects and patterns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParamType(Enum):
    """Kind of value a parameter holds."""

    INT = "int"
    BOOL = "bool"
    COLOR = "color"
    TEXT = "text"
    ENUM = "enum"


@dataclass(frozen=True)
class ParamOption:
    """One selectable choice of an enum parameter."""

    label: str
    value: int


@dataclass
class Param:
    """A named setting with type-specific validation.

    ``value`` holds the numeric state: 0xRRGGBB for colours, 0/1 for
    booleans, the native number for ints and enums. Text parameters keep
    their string in ``text``, limited to ``text_size - 1`` UTF-8 bytes.
    """

    key: str
    label: str
    type: ParamType
    value: int = 0
    default: int = 0
    minimum: int = 0
    maximum: int = 0
    options: tuple[ParamOption, ...] = ()
    text: str = ""
    text_size: int = 0
    default_text: str = ""

    def allows(self, value: int) -> bool:
        """Return True if ``value`` is one of the enum options."""
        return any(option.value == value for option in self.options)

    def set_int(self, value: int) -> None:
        """Store a numeric value, coerced according to the parameter type."""
        if self.type is ParamType.INT:
            self.value = min(max(value, self.minimum), self.maximum)
        elif self.type is ParamType.BOOL:
            self.value = 1 if value else 0
        elif self.type is ParamType.COLOR:
            self.value = value & 0xFFFFFF
        elif self.type is ParamType.ENUM:
            if self.allows(value):
                self.value = value

    def set_text(self, text: str) -> None:
        """Store a string, truncated to fit the text buffer; ignored for non-text params."""
        if self.type is not ParamType.TEXT or self.text_size == 0:
            return
        encoded = text.encode("utf-8")[: self.text_size - 1]
        self.text = encoded.decode("utf-8", errors="ignore")

    def reset(self) -> None:
        """Restore the default value (and default text for text params)."""
        self.value = self.default
        if self.type is ParamType.TEXT:
            self.text = self.default_text
"""Validated free-text labels such as individual ids and disease names."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "LabelError",
    "SimpleLabel",
    "check_white_space",
    "check_forbidden_chars",
]

_FORBIDDEN_CHARS = frozenset("/\\().")


class LabelError(ValueError):
    """Raised when a label is empty or malformed."""


def check_white_space(value: str) -> None:
    """Raise LabelError if ``value`` ends or begins with whitespace."""
    if value[-1:].isspace():
        raise LabelError(f"Trailing whitespace in '{value}'")
    if value[:1].isspace():
        raise LabelError(f"Leading whitespace in '{value}'")


def check_forbidden_chars(value: str) -> None:
    """Raise LabelError if ``value`` holds any of / \\ ( ) or a period."""
    found = next((c for c in value if c in _FORBIDDEN_CHARS), None)
    if found is not None:
        raise LabelError(f"Forbidden character '{found}' found in label '{value}'")


def _check_nonempty_label(value: str) -> None:
    if not value:
        raise LabelError("Empty label")
    check_forbidden_chars(value)
    check_white_space(value)


@dataclass(frozen=True)
class SimpleLabel:
    """A label that has passed the checks for its kind."""

    value: str

    @classmethod
    def individual_id(cls, value: str) -> "SimpleLabel":
        _check_nonempty_label(value)
        return cls(value)

    @classmethod
    def disease_label(cls, value: str) -> "SimpleLabel":
        _check_nonempty_label(value)
        return cls(value)

    @classmethod
    def gene_symbol(cls, value: str) -> "SimpleLabel":
        try:
            check_white_space(value)
        except LabelError as err:
            raise LabelError(f"Malformed label: '{value}'") from err
        return cls(value)

    def __str__(self) -> str:
        return self.value
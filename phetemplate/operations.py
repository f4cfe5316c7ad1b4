"""Edit operations that can be applied to a template cell."""

from __future__ import annotations

from enum import Enum

__all__ = ["Operation"]


class Operation(Enum):
    """An edit operation; its value is the text written or shown for it."""

    CLEAR = "clear"
    EDIT = "edit"
    TRIM = "trim"
    REMOVE_WHITESPACE = "remove whitespace"
    YES = "yes"
    NO = "no"
    NA = "na"
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"
    UNKNOWN = "U"
    OBSERVED = "observed"
    EXCLUDED = "excluded"

    @classmethod
    def from_keyword(cls, s: str) -> "Operation | None":
        """Return the operation named by ``s``, or None if it is not a keyword."""
        return _KEYWORDS.get(s)

    def __str__(self) -> str:
        return self.value


_KEYWORDS: dict[str, Operation] = {
    "clear": Operation.CLEAR,
    "trim": Operation.TRIM,
    "remove whitespace": Operation.REMOVE_WHITESPACE,
    "yes": Operation.YES,
    "no": Operation.NO,
    "na": Operation.NA,
    "M": Operation.MALE,
    "male": Operation.MALE,
    "F": Operation.FEMALE,
    "female": Operation.FEMALE,
    "O": Operation.OTHER,
    "other": Operation.OTHER,
    "U": Operation.UNKNOWN,
    "unknown": Operation.UNKNOWN,
    "observed": Operation.OBSERVED,
    "excluded": Operation.EXCLUDED,
}
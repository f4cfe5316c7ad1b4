"""Validated compact identifiers (CURIEs) used in curation templates."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CurieError",
    "DiseaseIdError",
    "HgncError",
    "TermId",
    "Curie",
    "check_valid_curie",
]


class CurieError(ValueError):
    """Raised when a string is not a well-formed CURIE."""


class DiseaseIdError(ValueError):
    """Raised when a disease identifier is malformed or has a wrong prefix."""


class HgncError(ValueError):
    """Raised when an HGNC gene identifier is malformed or has a wrong prefix."""


def check_valid_curie(s: str) -> bool:
    """Return True if ``s`` is a CURIE with a non-empty prefix and numeric suffix.

    Raises CurieError describing the first problem found.
    """
    if not s:
        raise CurieError("Empty CURIE")
    pos = s.find(":")
    if pos < 0:
        raise CurieError(f"Invalid CURIE with no colon: '{s}'")
    if any(c.isspace() for c in s):
        raise CurieError(f"Contains stray whitespace: '{s}'")
    if s.count(":") != 1:
        raise CurieError(f"Invalid CURIE with more than one colon: '{s}")
    if pos == 0:
        raise CurieError(f"Invalid CURIE with no prefix: '{s}'")
    if pos == len(s) - 1:
        raise CurieError(f"Invalid CURIE with no suffix: '{s}'")
    _, suffix = s.split(":", 1)
    if not all(c.isnumeric() for c in suffix):
        raise CurieError(
            f"Invalid CURIE with non-digit characters in suffix: '{s}'"
        )
    return True


@dataclass(frozen=True)
class TermId:
    """An ontology term identifier made of a prefix and a local id."""

    prefix: str
    local_id: str

    @classmethod
    def from_str(cls, value: str) -> "TermId":
        """Parse ``PREFIX:ID``; raise CurieError if either part is missing."""
        prefix, sep, local_id = value.partition(":")
        if not sep or not prefix or not local_id or any(
            c.isspace() for c in value
        ):
            raise CurieError(f"Could not parse TermId from '{value}'")
        return cls(prefix, local_id)

    def __str__(self) -> str:
        return f"{self.prefix}:{self.local_id}"


@dataclass(frozen=True)
class Curie:
    """A validated CURIE such as a PMID, a disease id or an HGNC id."""

    value: str

    @classmethod
    def new_pmid(cls, value: str) -> "Curie":
        check_valid_curie(value)
        if not value.startswith("PMID"):
            raise CurieError(f"Invalid PubMed prefix: '{value}'")
        return cls(value)

    @classmethod
    def new_disease_id(cls, value: str) -> "Curie":
        try:
            check_valid_curie(value)
        except CurieError as err:
            raise DiseaseIdError(f"Invalid disease identifier: {err}") from err
        if not (value.startswith("OMIM") or value.startswith("MONDO")):
            raise DiseaseIdError(f"Disease id has invalid prefix: '{value}'")
        return cls(value)

    @classmethod
    def new_hgnc_id(cls, value: str) -> "Curie":
        try:
            check_valid_curie(value)
        except CurieError as err:
            raise HgncError(f"Invalid HGNC identifier: {err}") from err
        if not value.startswith("HGNC"):
            raise HgncError(f"HNGC id has invalid prefix: '{value}'")
        return cls(value)

    def __str__(self) -> str:
        return self.value
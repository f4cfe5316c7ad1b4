"""The disease and gene columns that stay the same across one template."""

from __future__ import annotations

from dataclasses import dataclass

from phetemplate.curie import CurieError, TermId

__all__ = ["BundleError", "DiseaseGeneBundle"]

_MIN_NAME_LENGTH = 5


class BundleError(ValueError):
    """Raised when the disease/gene data of a bundle is malformed."""


def _leading_ws(value: str) -> BundleError:
    return BundleError(f"Leading whitespace in '{value}'")


def _trailing_ws(value: str) -> BundleError:
    return BundleError(f"Trailing whitespace in '{value}'")


@dataclass(frozen=True)
class DiseaseGeneBundle:
    """A disease, its label, the associated gene and the annotation transcript."""

    disease_id: TermId
    disease_name: str
    hgnc_id: TermId
    gene_symbol: str
    transcript: str

    def __post_init__(self) -> None:
        name = self.disease_name
        if name[:1].isspace():
            raise _leading_ws(name)
        if name[-1:].isspace():
            raise _trailing_ws(name)
        length = len(name.encode("utf-8"))
        if length < _MIN_NAME_LENGTH:
            raise BundleError(
                f"Label '{name}' is too short: length {length} "
                f"but at least {_MIN_NAME_LENGTH} required"
            )
        for field in (self.gene_symbol, self.transcript):
            if field[:1].isspace():
                raise _leading_ws(name)
            if field[-1:].isspace():
                raise _trailing_ws(name)
        if "." not in self.transcript:
            raise BundleError(
                f"Transcript '{self.transcript}' is missing a version"
            )

    @classmethod
    def from_str(
        cls,
        disease_id: str,
        disease_name: str,
        hgnc: str,
        symbol: str,
        transcript: str,
    ) -> "DiseaseGeneBundle":
        """Build a bundle, parsing the disease and HGNC identifiers."""
        return cls(
            _parse_term_id(disease_id),
            disease_name,
            _parse_term_id(hgnc),
            symbol,
            transcript,
        )

    def disease_id_as_string(self) -> str:
        return str(self.disease_id)

    def hgnc_id_as_string(self) -> str:
        return str(self.hgnc_id)

    def values(self) -> list[str]:
        """The five column values in template order."""
        return [
            str(self.disease_id),
            self.disease_name,
            str(self.hgnc_id),
            self.gene_symbol,
            self.transcript,
        ]


def _parse_term_id(value: str) -> TermId:
    try:
        return TermId.from_str(value)
    except CurieError as err:
        raise BundleError(f"Could not parse TermId from '{value}'") from err
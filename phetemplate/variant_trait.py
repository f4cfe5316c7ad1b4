"""Genotypes and the behaviour shared by all variant kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from phetemplate.curie import TermId

__all__ = [
    "OntologyTerm",
    "Genotype",
    "Variant",
    "HETEROZYGOUS",
    "HOMOZYGOUS",
    "HEMIZYGOUS",
    "get_genotype_term",
]


@dataclass(frozen=True)
class OntologyTerm:
    """An ontology term: its identifier and its name."""

    identifier: TermId
    name: str


class Genotype(Enum):
    """Zygosity of a variant."""

    HETEROZYGOUS = "heterozygous"
    HOMOZYGOUS = "homozygous"
    HEMIZYGOUS = "hemizygous"

    def __str__(self) -> str:
        return self.value


HETEROZYGOUS = OntologyTerm(TermId.from_str("GENO:0000135"), "heterozygous")
HOMOZYGOUS = OntologyTerm(TermId.from_str("GENO:0000136"), "homozygous")
HEMIZYGOUS = OntologyTerm(TermId.from_str("GENO:0000134"), "hemizygous")

_GENOTYPE_TERMS = {
    Genotype.HETEROZYGOUS: HETEROZYGOUS,
    Genotype.HOMOZYGOUS: HOMOZYGOUS,
    Genotype.HEMIZYGOUS: HEMIZYGOUS,
}


def get_genotype_term(gt: Genotype | None) -> OntologyTerm | None:
    """Return the GENO term for a genotype, or None when there is none."""
    if gt is None:
        return None
    return _GENOTYPE_TERMS[gt]


class Variant:
    """Mixin for variants that carry a ``genotype`` attribute."""

    genotype: str | None

    def set_heterozygous(self) -> None:
        self.genotype = Genotype.HETEROZYGOUS.value

    def set_homozygous(self) -> None:
        self.genotype = Genotype.HOMOZYGOUS.value

    def set_hemizygous(self) -> None:
        self.genotype = Genotype.HEMIZYGOUS.value
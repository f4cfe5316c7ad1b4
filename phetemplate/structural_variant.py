"""Chromosomal structural variants such as deletions and duplications."""

from __future__ import annotations

from dataclasses import dataclass

from phetemplate.curie import TermId
from phetemplate.hgvs_variant import new_variant_id
from phetemplate.variant_trait import OntologyTerm

__all__ = [
    "StructuralVariant",
    "ACCEPTABLE_GENOMES",
    "DELETION",
    "TRANSLOCATION",
    "DUPLICATION",
    "INVERSION",
    "CHROMOSOMAL_TRANSLOCATION",
    "CHROMOSOMAL_DELETION",
    "CHROMOSOMAL_DUPLICATION",
    "CHROMOSOMAL_INVERSION",
]

ACCEPTABLE_GENOMES = ("GRCh38", "hg38")

DELETION = "DEL"
TRANSLOCATION = "TRANSL"
DUPLICATION = "DUP"
INVERSION = "INV"

CHROMOSOMAL_TRANSLOCATION = OntologyTerm(
    TermId.from_str("SO:1000044"), "chromosomal_translocation"
)
CHROMOSOMAL_DELETION = OntologyTerm(
    TermId.from_str("SO:1000029"), "chromosomal_deletion"
)
CHROMOSOMAL_DUPLICATION = OntologyTerm(
    TermId.from_str("SO:1000037"), "chromosomal_duplication"
)
CHROMOSOMAL_INVERSION = OntologyTerm(
    TermId.from_str("SO:1000030"), "chromosomal_inversion"
)


@dataclass
class StructuralVariant:
    """A structural variant described by free text and a Sequence Ontology term."""

    variant_id: str
    label: str
    gene_symbol: str
    hgnc_id: str
    so_id: str
    so_label: str
    genotype: str | None = None

    @classmethod
    def create(
        cls,
        cell_contents: str,
        gene_symbol: str,
        gene_id: str,
        so_term: OntologyTerm,
        variant_id: str | None = None,
    ) -> "StructuralVariant":
        """Build a variant; a random id is made if none is given.

        Raises ValueError if the gene symbol or the HGNC id is empty.
        """
        if variant_id is None:
            variant_id = new_variant_id()
        if not gene_symbol:
            raise ValueError("Need to pass a valid gene symbol!")
        if not gene_id:
            raise ValueError("Need to pass a valid HGNC gene id!")
        return cls(
            variant_id=variant_id,
            label=cell_contents.strip(),
            gene_symbol=gene_symbol,
            hgnc_id=gene_id,
            so_id=str(so_term.identifier),
            so_label=so_term.name,
        )

    @classmethod
    def chromosomal_deletion(
        cls,
        cell_contents: str,
        gene_symbol: str,
        gene_id: str,
        variant_id: str | None = None,
    ) -> "StructuralVariant":
        return cls.create(
            cell_contents, gene_symbol, gene_id, CHROMOSOMAL_DELETION, variant_id
        )

    @classmethod
    def chromosomal_duplication(
        cls,
        cell_contents: str,
        gene_symbol: str,
        gene_id: str,
        variant_id: str | None = None,
    ) -> "StructuralVariant":
        return cls.create(
            cell_contents, gene_symbol, gene_id, CHROMOSOMAL_DUPLICATION, variant_id
        )

    @classmethod
    def chromosomal_inversion(
        cls,
        cell_contents: str,
        gene_symbol: str,
        gene_id: str,
        variant_id: str | None = None,
    ) -> "StructuralVariant":
        return cls.create(
            cell_contents, gene_symbol, gene_id, CHROMOSOMAL_INVERSION, variant_id
        )

    @classmethod
    def chromosomal_translocation(
        cls,
        cell_contents: str,
        gene_symbol: str,
        gene_id: str,
        variant_id: str | None = None,
    ) -> "StructuralVariant":
        return cls.create(
            cell_contents,
            gene_symbol,
            gene_id,
            CHROMOSOMAL_TRANSLOCATION,
            variant_id,
        )

    @classmethod
    def code_as_chromosomal_deletion(
        cls, allele: str, gene_id: str, gene_symbol: str
    ) -> "StructuralVariant":
        return cls.chromosomal_deletion(allele, gene_symbol, gene_id)

    @classmethod
    def code_as_chromosomal_inversion(
        cls, allele: str, gene_id: str, gene_symbol: str
    ) -> "StructuralVariant":
        return cls.chromosomal_inversion(allele, gene_symbol, gene_id)

    @classmethod
    def code_as_chromosomal_duplication(
        cls, allele: str, gene_id: str, gene_symbol: str
    ) -> "StructuralVariant":
        return cls.chromosomal_duplication(allele, gene_symbol, gene_id)

    @classmethod
    def code_as_chromosomal_translocation(
        cls, allele: str, gene_id: str, gene_symbol: str
    ) -> "StructuralVariant":
        return cls.chromosomal_translocation(allele, gene_symbol, gene_id)
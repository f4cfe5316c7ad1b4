"""The gene and variant columns of one template row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["GeneVariantBundle"]

_N_FIELDS = 6


@dataclass
class GeneVariantBundle:
    """Gene, transcript, the two alleles and a free-text variant comment."""

    hgnc_id: str
    gene_symbol: str
    transcript: str
    allele1: str
    allele2: str
    variant_comment: str

    @classmethod
    def from_row(cls, row: Sequence[str], start_idx: int) -> "GeneVariantBundle":
        """Build from the six cells of ``row`` that start at ``start_idx``."""
        if start_idx < 0 or len(row) < start_idx + _N_FIELDS:
            raise IndexError(
                f"Row has {len(row)} fields; cannot read gene/variant at {start_idx}"
            )
        return cls(*row[start_idx : start_idx + _N_FIELDS])
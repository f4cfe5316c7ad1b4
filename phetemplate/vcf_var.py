"""A variant in VCF coordinates."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["VcfVar"]

_MAX_POS = 2**32 - 1


@dataclass(frozen=True)
class VcfVar:
    """Chromosome, 1-based position, reference and alternate allele."""

    chrom: str
    pos: int
    ref_allele: str
    alt_allele: str

    def __post_init__(self) -> None:
        if not 0 <= self.pos <= _MAX_POS:
            raise ValueError(f"Position out of range: {self.pos}")
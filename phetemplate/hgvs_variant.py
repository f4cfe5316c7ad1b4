"""A small variant described in HGVS and located in VCF coordinates."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field

from phetemplate.variant_trait import Variant
from phetemplate.vcf_var import VcfVar

__all__ = ["HgvsVariant", "new_variant_id"]

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 25


def new_variant_id() -> str:
    """Return a random identifier of the form ``var_`` plus 25 alphanumerics."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
    return f"var_{suffix}"


@dataclass
class HgvsVariant(Variant):
    """A validated HGVS variant with its genomic location."""

    assembly: str
    chr: str
    position: int
    ref_allele: str
    alt_allele: str
    symbol: str | None = None
    hgnc_id: str | None = None
    hgvs: str | None = None
    transcript: str | None = None
    g_hgvs: str | None = None
    variant_id: str = field(default_factory=new_variant_id)
    genotype: str | None = None

    @classmethod
    def from_vcf(
        cls,
        assembly: str,
        vcf_var: VcfVar,
        symbol: str | None = None,
        hgnc_id: str | None = None,
        hgvs: str | None = None,
        transcript: str | None = None,
        g_hgvs: str | None = None,
        variant_id: str | None = None,
    ) -> "HgvsVariant":
        """Build from VCF coordinates; a random id is made if none is given."""
        return cls(
            assembly=assembly,
            chr=vcf_var.chrom,
            position=vcf_var.pos,
            ref_allele=vcf_var.ref_allele,
            alt_allele=vcf_var.alt_allele,
            symbol=symbol,
            hgnc_id=hgnc_id,
            hgvs=hgvs,
            transcript=transcript,
            g_hgvs=g_hgvs,
            variant_id=variant_id if variant_id is not None else new_variant_id(),
        )
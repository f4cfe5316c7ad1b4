"""Validate HGVS expressions with the VariantValidator web service."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from typing import Any

from phetemplate.hgvs_variant import HgvsVariant
from phetemplate.vcf_var import VcfVar

__all__ = ["VariantError", "VariantValidator", "get_variant_validator_url"]

GENOME_ASSEMBLY_HG38 = "hg38"
ACCEPTABLE_GENOMES = ("GRCh38", "hg38")

_NCBI_NUCCORE = "https://www.ncbi.nlm.nih.gov/nuccore/"
_POSITION = re.compile(r"\+?[0-9]+")
_MAX_POS = 2**32 - 1


class VariantError(ValueError):
    """Raised when a variant cannot be validated or the response is malformed."""


def get_variant_validator_url(genome_assembly: str, transcript: str, hgvs: str) -> str:
    """Return the VariantValidator API URL for a transcript and HGVS expression."""
    return (
        "https://rest.variantvalidator.org/VariantValidator/variantvalidator/"
        f"{genome_assembly}/{transcript}%3A{hgvs}/{transcript}"
        "?content-type=application%2Fjson"
    )


def _dump(value: Any) -> str:
    return json.dumps(value)


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


class VariantValidator:
    """Client that turns HGVS expressions into HgvsVariant objects."""

    def __init__(self, genome_build: str = GENOME_ASSEMBLY_HG38) -> None:
        if genome_build not in ACCEPTABLE_GENOMES:
            raise VariantError(f'genome_build "{genome_build}" not recognized')
        self.genome_assembly = genome_build

    @classmethod
    def hg38(cls) -> "VariantValidator":
        return cls(GENOME_ASSEMBLY_HG38)

    def encode_hgvs(self, hgvs: str, transcript: str) -> HgvsVariant:
        """Query the API for ``transcript:hgvs`` and return the variant."""
        url = get_variant_validator_url(self.genome_assembly, transcript, hgvs)
        try:
            with urllib.request.urlopen(url) as response:
                payload = json.load(response)
        except (urllib.error.URLError, OSError) as err:
            raise VariantError(str(err)) from err
        except json.JSONDecodeError as err:
            raise VariantError(f"Could not decode response: {err}") from err
        return self.parse_response(payload)

    def parse_response(self, response: Any) -> HgvsVariant:
        """Build an HgvsVariant from a decoded VariantValidator response."""
        if not isinstance(response, dict):
            raise VariantError("Response is not a JSON object")
        if "flag" in response and response["flag"] != "gene_variant":
            raise VariantError(
                f"Expecting to get a gene_variant but got {_dump(response['flag'])}"
            )
        variant_key = next(
            (k for k in sorted(response) if k not in ("flag", "metadata")), None
        )
        if variant_key is None:
            raise VariantError("Missing variant key")
        var = response[variant_key]

        hgnc = _str_or_none(_get(_get(var, "gene_ids"), "hgnc_id"))
        symbol = _str_or_none(_get(var, "gene_symbol"))

        assemblies = _get(var, "primary_assembly_loci")
        if assemblies is None:
            raise VariantError("Missing primary_assembly_loci")
        assembly = _get(assemblies, self.genome_assembly)
        if assembly is None:
            raise VariantError(
                f"Could not identify {self.genome_assembly} in response"
            )

        hgvs_transcript_var = _str_or_none(_get(var, "hgvs_transcript_variant"))
        genomic_hgvs = _str_or_none(_get(assembly, "hgvs_genomic_description"))

        transcript = _str_or_none(
            _get(_get(var, "reference_sequence_records"), "transcript")
        )
        if transcript is not None and transcript.startswith(_NCBI_NUCCORE):
            transcript = transcript[len(_NCBI_NUCCORE):]

        vcf = _get(assembly, "vcf")
        if vcf is None:
            raise VariantError("Could not identify vcf element")
        chrom = _str_or_none(_get(vcf, "chr"))
        if chrom is None:
            raise VariantError(f"Malformed chr: {_dump(vcf)}")
        pos_text = _str_or_none(_get(vcf, "pos"))
        if pos_text is None:
            raise VariantError(f"Malformed pos: {_dump(vcf)}")
        if not _POSITION.fullmatch(pos_text) or int(pos_text) > _MAX_POS:
            raise VariantError(f"Error 'invalid position: {pos_text}'")
        position = int(pos_text)
        reference = _str_or_none(_get(vcf, "ref"))
        if reference is None:
            raise VariantError(f"Malformed REF: '{_dump(vcf)}'")
        alternate = _str_or_none(_get(vcf, "alt"))
        if alternate is None:
            raise VariantError(f"Malformed ALT: '{_dump(vcf)}'")

        vcf_var = VcfVar(chrom, position, reference, alternate)
        return HgvsVariant.from_vcf(
            self.genome_assembly,
            vcf_var,
            symbol=symbol,
            hgnc_id=hgnc,
            hgvs=transcript,
            transcript=hgvs_transcript_var,
            g_hgvs=genomic_hgvs,
        )
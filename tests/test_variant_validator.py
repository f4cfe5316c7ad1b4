import copy
import io
import json
from unittest import mock

import pytest

from phetemplate.variant_validator import (
    VariantError,
    VariantValidator,
    get_variant_validator_url,
)

FBN1_RESPONSE = {
    "flag": "gene_variant",
    "metadata": {"variantvalidator_version": "x"},
    "NM_000138.5:c.8242G>T": {
        "gene_ids": {"hgnc_id": "HGNC:3603"},
        "gene_symbol": "FBN1",
        "hgvs_transcript_variant": "NM_000138.5:c.8242G>T",
        "reference_sequence_records": {
            "transcript": "https://www.ncbi.nlm.nih.gov/nuccore/NM_000138.5"
        },
        "primary_assembly_loci": {
            "hg38": {
                "hgvs_genomic_description": "NC_000015.10:g.48411364C>A",
                "vcf": {"chr": "chr15", "pos": "48411364", "ref": "C", "alt": "A"},
            }
        },
    },
}


@pytest.fixture
def response():
    return copy.deepcopy(FBN1_RESPONSE)


def test_url():
    expected = "https://rest.variantvalidator.org/VariantValidator/variantvalidator/hg38/NM_000138.5%3Ac.8230C>T/NM_000138.5?content-type=application%2Fjson"
    assert get_variant_validator_url("hg38", "NM_000138.5", "c.8230C>T") == expected


def test_parse_fbn1(response):
    var = VariantValidator.hg38().parse_response(response)
    assert var.assembly == "hg38"
    assert var.chr == "chr15"
    assert var.position == 48411364
    assert var.ref_allele == "C"
    assert var.alt_allele == "A"
    assert var.symbol == "FBN1"
    assert var.hgnc_id == "HGNC:3603"
    assert var.hgvs == "NM_000138.5"
    assert var.transcript == "NM_000138.5:c.8242G>T"
    assert var.g_hgvs == "NC_000015.10:g.48411364C>A"
    assert var.genotype is None
    assert var.variant_id.startswith("var_")


def test_unknown_genome_build():
    with pytest.raises(VariantError, match='genome_build "hg19" not recognized'):
        VariantValidator("hg19")


def test_grch38_accepted_but_needs_matching_locus(response):
    validator = VariantValidator("GRCh38")
    with pytest.raises(VariantError, match="Could not identify GRCh38 in response"):
        validator.parse_response(response)


def test_wrong_flag(response):
    response["flag"] = "warning"
    with pytest.raises(VariantError, match="Expecting to get a gene_variant"):
        VariantValidator.hg38().parse_response(response)


def test_missing_variant_key():
    with pytest.raises(VariantError, match="Missing variant key"):
        VariantValidator.hg38().parse_response({"flag": "gene_variant", "metadata": {}})


def test_missing_loci(response):
    del response["NM_000138.5:c.8242G>T"]["primary_assembly_loci"]
    with pytest.raises(VariantError, match="Missing primary_assembly_loci"):
        VariantValidator.hg38().parse_response(response)


def test_missing_vcf(response):
    del response["NM_000138.5:c.8242G>T"]["primary_assembly_loci"]["hg38"]["vcf"]
    with pytest.raises(VariantError, match="Could not identify vcf element"):
        VariantValidator.hg38().parse_response(response)


@pytest.mark.parametrize("key, text", [("chr", "Malformed chr"), ("pos", "Malformed pos"),
                                       ("ref", "Malformed REF"), ("alt", "Malformed ALT")])
def test_missing_vcf_field(response, key, text):
    del response["NM_000138.5:c.8242G>T"]["primary_assembly_loci"]["hg38"]["vcf"][key]
    with pytest.raises(VariantError, match=text):
        VariantValidator.hg38().parse_response(response)


def test_bad_position(response):
    response["NM_000138.5:c.8242G>T"]["primary_assembly_loci"]["hg38"]["vcf"]["pos"] = "12a"
    with pytest.raises(VariantError):
        VariantValidator.hg38().parse_response(response)


def test_transcript_without_prefix_kept(response):
    records = response["NM_000138.5:c.8242G>T"]["reference_sequence_records"]
    records["transcript"] = "NM_000138.5"
    var = VariantValidator.hg38().parse_response(response)
    assert var.hgvs == "NM_000138.5"


def test_encode_hgvs_uses_api(response):
    body = io.BytesIO(json.dumps(response).encode("utf-8"))
    with mock.patch("urllib.request.urlopen", return_value=body) as urlopen:
        var = VariantValidator.hg38().encode_hgvs("c.8242G>T", "NM_000138.5")
    called_url = urlopen.call_args[0][0]
    assert called_url == get_variant_validator_url("hg38", "NM_000138.5", "c.8242G>T")
    assert var.position == 48411364
    assert var.symbol == "FBN1"


def test_encode_hgvs_network_error():
    with mock.patch("urllib.request.urlopen", side_effect=OSError("unreachable")):
        with pytest.raises(VariantError, match="unreachable"):
            VariantValidator.hg38().encode_hgvs("c.8242G>T", "NM_000138.5")
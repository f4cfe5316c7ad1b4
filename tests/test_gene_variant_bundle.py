import pytest

from phetemplate.gene_variant_bundle import GeneVariantBundle


@pytest.fixture
def row():
    return [
        "PMID:29482508",
        "A case report",
        "current case",
        "",
        "OMIM:135100",
        "Fibrodysplasia ossificans progressiva",
        "HGNC:171",
        "ACVR1",
        "NM_001111067.4",
        "c.617G>A",
        "na",
        "NP_001104537.1:p.(Arg206His)",
        "P9Y",
    ]


def test_from_row(row):
    bundle = GeneVariantBundle.from_row(row, 6)
    assert bundle.hgnc_id == "HGNC:171"
    assert bundle.gene_symbol == "ACVR1"
    assert bundle.transcript == "NM_001111067.4"
    assert bundle.allele1 == "c.617G>A"
    assert bundle.allele2 == "na"
    assert bundle.variant_comment == "NP_001104537.1:p.(Arg206His)"


def test_from_row_equals_direct_construction(row):
    assert GeneVariantBundle.from_row(row, 6) == GeneVariantBundle(*row[6:12])


def test_from_row_too_short(row):
    with pytest.raises(IndexError):
        GeneVariantBundle.from_row(row[:11], 6)
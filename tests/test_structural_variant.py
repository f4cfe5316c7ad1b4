import pytest

from phetemplate.structural_variant import (
    CHROMOSOMAL_DELETION,
    StructuralVariant,
)


def test_deletion_uses_so_term():
    sv = StructuralVariant.chromosomal_deletion("del exon 5", "FBN1", "HGNC:3603", "var_1")
    assert sv.so_id == "SO:1000029"
    assert sv.so_label == "chromosomal_deletion"
    assert sv.variant_id == "var_1"
    assert sv.genotype is None


def test_duplication_term():
    sv = StructuralVariant.chromosomal_duplication("dup", "FBN1", "HGNC:3603", "v")
    assert sv.so_id == "SO:1000037"
    assert sv.so_label == "chromosomal_duplication"


def test_inversion_term():
    sv = StructuralVariant.chromosomal_inversion("inv", "FBN1", "HGNC:3603", "v")
    assert sv.so_id == "SO:1000030"
    assert sv.so_label == "chromosomal_inversion"


def test_translocation_term():
    sv = StructuralVariant.chromosomal_translocation("t", "FBN1", "HGNC:3603", "v")
    assert sv.so_id == "SO:1000044"
    assert sv.so_label == "chromosomal_translocation"


def test_label_is_trimmed():
    sv = StructuralVariant.chromosomal_deletion("  del exon 5 ", "FBN1", "HGNC:3603")
    assert sv.label == "del exon 5"


def test_gene_fields_kept():
    sv = StructuralVariant.create("x", "FBN1", "HGNC:3603", CHROMOSOMAL_DELETION, "id1")
    assert sv.gene_symbol == "FBN1"
    assert sv.hgnc_id == "HGNC:3603"


def test_random_id_format():
    sv = StructuralVariant.chromosomal_deletion("del", "FBN1", "HGNC:3603")
    assert sv.variant_id.startswith("var_")
    suffix = sv.variant_id[len("var_"):]
    assert len(suffix) == 25
    assert suffix.isalnum()


def test_random_ids_differ():
    a = StructuralVariant.chromosomal_deletion("del", "FBN1", "HGNC:3603")
    b = StructuralVariant.chromosomal_deletion("del", "FBN1", "HGNC:3603")
    assert a.variant_id != b.variant_id
    assert a.label == b.label


@pytest.mark.parametrize(
    "factory, so_id",
    [
        (StructuralVariant.code_as_chromosomal_deletion, "SO:1000029"),
        (StructuralVariant.code_as_chromosomal_inversion, "SO:1000030"),
        (StructuralVariant.code_as_chromosomal_duplication, "SO:1000037"),
        (StructuralVariant.code_as_chromosomal_translocation, "SO:1000044"),
    ],
)
def test_code_as_argument_order(factory, so_id):
    sv = factory("allele text", "HGNC:3603", "FBN1")
    assert sv.hgnc_id == "HGNC:3603"
    assert sv.gene_symbol == "FBN1"
    assert sv.so_id == so_id
    assert sv.label == "allele text"


def test_empty_gene_symbol_rejected():
    with pytest.raises(ValueError, match="gene symbol"):
        StructuralVariant.chromosomal_deletion("del", "", "HGNC:3603")


def test_empty_gene_id_rejected():
    with pytest.raises(ValueError, match="HGNC gene id"):
        StructuralVariant.chromosomal_deletion("del", "FBN1", "")
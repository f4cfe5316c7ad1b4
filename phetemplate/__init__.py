"""Field checks, template reading and variant models for phenopacket curation templates."""

__version__ = "0.2.28"

__all__ = [
    "acmg",
    "curie",
    "disease_bundle",
    "disease_gene_bundle",
    "excel",
    "gene_variant_bundle",
    "hgvs_variant",
    "individual_bundle",
    "operations",
    "simple_label",
    "structural_variant",
    "variant_trait",
    "variant_validator",
    "vcf_var",
]
# phetemplate

Building blocks for curating cohorts of phenopackets from a tabular
template: two header rows that describe the columns, followed by one row per
individual. The package checks individual fields of such a template, reads
template workbooks, and models the variants that go with each case.

It uses only the Python standard library and supports Python 3.10 and later.
The `test` extra installs pytest for running the test suite.

## Modules

| Module | Contents |
| --- | --- |
| `phetemplate.curie` | `check_valid_curie`, `TermId` and `Curie` with `new_pmid`, `new_disease_id` (OMIM/MONDO) and `new_hgnc_id`; errors `CurieError`, `DiseaseIdError`, `HgncError` |
| `phetemplate.simple_label` | `SimpleLabel` with `individual_id`, `disease_label` and `gene_symbol`; `check_white_space`, `check_forbidden_chars`; error `LabelError` |
| `phetemplate.disease_gene_bundle` | `DiseaseGeneBundle`: disease id and name, HGNC id, gene symbol and versioned transcript; error `BundleError` |
| `phetemplate.operations` | `Operation`: the cell edits a curation front end may request, with `from_keyword` |
| `phetemplate.excel` | `read_excel_to_dataframe`: read the sheet named `Sheet1` of an .xlsx workbook into rows of strings; error `ExcelError` |
| `phetemplate.individual_bundle`, `phetemplate.disease_bundle`, `phetemplate.gene_variant_bundle` | `IndividualBundle`, `DiseaseBundle`, `GeneVariantBundle`: the column blocks of one template row, built with `from_row` |
| `phetemplate.acmg` | `AcmgPathogenicityClassification` with `from_str` |
| `phetemplate.vcf_var` | `VcfVar`: chromosome, position, reference and alternate allele |
| `phetemplate.variant_trait` | `Genotype`, `OntologyTerm`, the `Variant` mixin and `get_genotype_term` |
| `phetemplate.hgvs_variant` | `HgvsVariant` (built with `from_vcf`) and `new_variant_id` |
| `phetemplate.structural_variant` | `StructuralVariant` with constructors for deletions, duplications, inversions and translocations |
| `phetemplate.variant_validator` | `VariantValidator` and `get_variant_validator_url` for the VariantValidator REST service; error `VariantError` |

## Examples

Identifiers are validated when they are created; a bad value raises an
exception whose message says what is wrong.

```python
from phetemplate.curie import Curie, CurieError

pmid = Curie.new_pmid("PMID:12345")

try:
    Curie.new_pmid("PMID12345")
except CurieError as err:
    print(err)  # Invalid CURIE with no colon: 'PMID12345'
```

Labels may not start or end with whitespace, and individual ids and disease
labels may not be empty or contain `/`, `\`, `(`, `)` or `.`:

```python
from phetemplate.simple_label import LabelError, SimpleLabel

SimpleLabel.individual_id("individual II:3")

try:
    SimpleLabel.individual_id("patient (II:2)")
except LabelError as err:
    print(err)  # Forbidden character '(' found in label 'patient (II:2)'
```

The disease and gene columns of a template go together:

```python
from phetemplate.disease_gene_bundle import DiseaseGeneBundle

bundle = DiseaseGeneBundle.from_str(
    "OMIM:154700", "Marfan syndrome", "HGNC:3603", "FBN1", "NM_000138.5"
)
print(bundle.values())
# ['OMIM:154700', 'Marfan syndrome', 'HGNC:3603', 'FBN1', 'NM_000138.5']
```

A transcript without a version, a disease name shorter than five
characters, or leading or trailing whitespace raises `BundleError`.

A template workbook is read from its `Sheet1`; the first two rows are the
headers and every row must have as many fields as the first, otherwise
`ExcelError` is raised:

```python
from phetemplate.excel import read_excel_to_dataframe

rows = read_excel_to_dataframe("template.xlsx")
```

Requests to the variant service use a fixed URL layout:

```python
from phetemplate.variant_validator import VariantValidator, get_variant_validator_url

print(get_variant_validator_url("hg38", "NM_000138.5", "c.8230C>T"))

validator = VariantValidator.hg38()
variant = validator.encode_hgvs("c.8230C>T", "NM_000138.5")  # needs network access
```

`encode_hgvs` fetches the response and hands it to `parse_response`, which
can also be called directly with an already decoded JSON object. The
resulting `HgvsVariant` holds the genome assembly, the VCF coordinates, the
gene symbol and HGNC id, the transcript accession (`hgvs`), the transcript
HGVS expression (`transcript`) and the genomic HGVS expression (`g_hgvs`),
with a random `var_...` identifier. Problems with the request or the
response raise `VariantError`. Only `hg38` and `GRCh38` are accepted as
genome builds.

## What it does not do

- It has no command-line tool and no user interface; it is a library.
- It does not assemble or check a whole template: there is no header-row
  validation, no checking of HPO term columns against the Human Phenotype
  Ontology, and no editing of a loaded cohort.
- The row bundles (`IndividualBundle`, `DiseaseBundle`,
  `GeneVariantBundle`) only split a row into fields; they do not validate
  the values.
- It does not export GA4GH phenopackets and does not cache validated
  variants on disk.
"""The disease columns of one template row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["DiseaseBundle"]

_N_FIELDS = 2


@dataclass
class DiseaseBundle:
    """A disease identifier and its label."""

    disease_id: str
    disease_label: str

    @classmethod
    def from_row(cls, row: Sequence[str], start_idx: int) -> "DiseaseBundle":
        """Build from the two cells of ``row`` that start at ``start_idx``."""
        if start_idx < 0 or len(row) < start_idx + _N_FIELDS:
            raise IndexError(
                f"Row has {len(row)} fields; cannot read disease at {start_idx}"
            )
        disease_id, disease_label = row[start_idx : start_idx + _N_FIELDS]
        return cls(disease_id, disease_label)
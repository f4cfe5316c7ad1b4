"""The individual and demographic columns of one template row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["IndividualBundle"]

_N_DEMOGRAPHIC_FIELDS = 4


@dataclass
class IndividualBundle:
    """Publication, individual and demographic data of one phenopacket row."""

    pmid: str
    title: str
    individual_id: str
    comment: str
    age_of_onset: str
    age_at_last_encounter: str
    deceased: str
    sex: str

    @classmethod
    def from_row(cls, row: Sequence[str], start_idx: int) -> "IndividualBundle":
        """Build from a template row.

        The first four cells hold the individual; ``start_idx`` is the index
        of the first of the four demographic cells.
        """
        needed = max(4, start_idx + _N_DEMOGRAPHIC_FIELDS)
        if len(row) < needed:
            raise IndexError(
                f"Row has {len(row)} fields but at least {needed} are required"
            )
        pmid, title, individual_id, comment = row[0:4]
        onset, last_encounter, deceased, sex = row[
            start_idx : start_idx + _N_DEMOGRAPHIC_FIELDS
        ]
        return cls(
            pmid,
            title,
            individual_id,
            comment,
            onset,
            last_encounter,
            deceased,
            sex,
        )
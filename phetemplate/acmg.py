"""ACMG pathogenicity classification of variants."""

from __future__ import annotations

import logging
from enum import IntEnum

__all__ = ["AcmgPathogenicityClassification"]

_log = logging.getLogger(__name__)


class AcmgPathogenicityClassification(IntEnum):
    """The five ACMG categories plus a value for no classification."""

    NOT_PROVIDED = 0
    BENIGN = 1
    LIKELY_BENIGN = 2
    UNCERTAIN_SIGNIFICANCE = 3
    LIKELY_PATHOGENIC = 4
    PATHOGENIC = 5

    @classmethod
    def from_str(cls, acmg: str) -> "AcmgPathogenicityClassification":
        """Parse a category name; unrecognised text gives NOT_PROVIDED."""
        key = acmg.lower().replace(" ", "_")
        if key != "not_provided":
            try:
                return cls[key.upper()]
            except KeyError:
                pass
        _log.warning("Unrecognized ACMG category '%s'", acmg)
        return cls.NOT_PROVIDED

    def __str__(self) -> str:
        return self.name.lower()
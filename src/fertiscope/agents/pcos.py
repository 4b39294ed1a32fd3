"""
Rotterdam PCOS criteria evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fertiscope.config import ClinicalThresholds, get_config
from fertiscope.models.observations import PCOSObservation


@dataclass(frozen=True)
class PCOSResult:
    """Rotterdam evaluation.

    ``criteria_met_count`` and ``calculated_diagnosis`` are always derived
    by :func:`calculate_pcos_criteria`; construct results through it.
    """
    oligo_anovulation: bool = False
    clinical_hyperandrogenism: bool = False
    biochemical_hyperandrogenism: bool = False
    polycystic_ovaries_us: bool = False
    criteria_met_count: int = 0
    calculated_diagnosis: bool = False

    @property
    def hyperandrogenism(self) -> bool:
        return self.clinical_hyperandrogenism or self.biochemical_hyperandrogenism

    @property
    def indicator_message(self) -> str:
        message = f"Rotterdam PCOS Criteria: {self.criteria_met_count}/3 met"
        if self.calculated_diagnosis:
            message += " - PCOS Diagnosis"
        return message

    def to_dict(self) -> dict:
        return {
            'oligo_anovulation': self.oligo_anovulation,
            'clinical_hyperandrogenism': self.clinical_hyperandrogenism,
            'biochemical_hyperandrogenism': self.biochemical_hyperandrogenism,
            'polycystic_ovaries_us': self.polycystic_ovaries_us,
            'criteria_met_count': self.criteria_met_count,
            'calculated_diagnosis': self.calculated_diagnosis,
        }


def calculate_pcos_criteria(
    oligo_anovulation: bool,
    clinical_hyperandrogenism: bool,
    biochemical_hyperandrogenism: bool,
    polycystic_ovaries_us: bool,
    thresholds: Optional[ClinicalThresholds] = None,
) -> PCOSResult:
    """
    Apply the Rotterdam 2-of-3 rule.

    Clinical and biochemical hyperandrogenism share a single vote, so the
    count never exceeds 3.
    """
    t = thresholds or get_config().clinical
    votes = (
        bool(oligo_anovulation),
        bool(clinical_hyperandrogenism or biochemical_hyperandrogenism),
        bool(polycystic_ovaries_us),
    )
    count = sum(votes)

    return PCOSResult(
        oligo_anovulation=bool(oligo_anovulation),
        clinical_hyperandrogenism=bool(clinical_hyperandrogenism),
        biochemical_hyperandrogenism=bool(biochemical_hyperandrogenism),
        polycystic_ovaries_us=bool(polycystic_ovaries_us),
        criteria_met_count=count,
        calculated_diagnosis=count >= t.rotterdam_min_criteria,
    )


def evaluate_pcos(
    observation: PCOSObservation,
    thresholds: Optional[ClinicalThresholds] = None,
) -> PCOSResult:
    """Evaluate a :class:`PCOSObservation` record."""
    return calculate_pcos_criteria(
        observation.oligo_anovulation,
        observation.clinical_hyperandrogenism,
        observation.biochemical_hyperandrogenism,
        observation.polycystic_ovaries_us,
        thresholds=thresholds,
    )

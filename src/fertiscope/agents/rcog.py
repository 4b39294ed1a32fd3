"""
RCOG-guided investigation recommendations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fertiscope.agents.pcos import PCOSResult
from fertiscope.config import ClinicalThresholds, TubalTestType, Urgency, get_config
from fertiscope.utils.values import is_present

ADVANCED_MATERNAL_AGE = "Advanced maternal age"


@dataclass(frozen=True)
class NextSteps:
    """Structured follow-up flags."""
    tubal_test: bool = False
    hysteroscopy: bool = False
    dfsh: bool = False
    male_factor: bool = False
    referral_needed: bool = False
    tubal_test_type: Optional[TubalTestType] = None
    referral_reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'tubal_test': self.tubal_test,
            'hysteroscopy': self.hysteroscopy,
            'dfsh': self.dfsh,
            'male_factor': self.male_factor,
            'referral_needed': self.referral_needed,
            'tubal_test_type': self.tubal_test_type.value if self.tubal_test_type else None,
            'referral_reason': self.referral_reason,
        }


@dataclass(frozen=True)
class RCOGRecommendations:
    """Urgency tier plus ordered recommendations."""
    recommendations: tuple[str, ...]
    urgency: Urgency
    reasons_for_urgency: Optional[tuple[str, ...]]
    next_steps: NextSteps

    def to_dict(self) -> dict:
        return {
            'recommendations': list(self.recommendations),
            'urgency': self.urgency.value,
            'reasons_for_urgency': (
                list(self.reasons_for_urgency) if self.reasons_for_urgency is not None else None
            ),
            'next_steps': self.next_steps.to_dict(),
        }


class RCOGRecommendationEngine:
    """
    RCOG fertility investigation pathway.

    Each guideline item that applies appends its recommendation text in
    evaluation order. Items are additive and never deduplicated.

    Attributes:
        thresholds: Clinical threshold configuration
    """

    def __init__(self, thresholds: Optional[ClinicalThresholds] = None):
        self.thresholds = thresholds or get_config().clinical

    def generate(
        self,
        age: Optional[float],
        duration: Optional[float],
        male_factor_present: bool,
        pcos: PCOSResult,
        tubal_pathology: bool,
        afc_total: Optional[float],
    ) -> RCOGRecommendations:
        """
        Build recommendations for one assessment.

        Args:
            age: Female age in years
            duration: Infertility duration in years
            male_factor_present: Abnormal semen analysis
            pcos: Rotterdam evaluation
            tubal_pathology: Known tubal pathology (skips patency testing)
            afc_total: Total antral follicle count

        Returns:
            RCOGRecommendations
        """
        t = self.thresholds
        age_known = is_present(age)
        duration_known = is_present(duration)

        recommendations = []
        reasons = []
        urgency = Urgency.ROUTINE

        tubal_test = False
        tubal_test_type = None
        dfsh = False

        older = age_known and age >= t.rcog_expedited_age
        long_duration = duration_known and duration > t.rcog_expedited_duration_years

        if older or long_duration:
            recommendations.append("Complete infertility workup within 3 months")
            if age_known and age >= t.rcog_urgent_age:
                urgency = Urgency.URGENT
                reasons.append(ADVANCED_MATERNAL_AGE)
            else:
                urgency = Urgency.EXPEDITED
                reasons.append(
                    f"Age >{t.rcog_expedited_age:g} or duration "
                    f">{t.rcog_expedited_duration_years:g} years"
                )

        if duration_known and duration >= t.rcog_tubal_test_duration_years and not tubal_pathology:
            tubal_test = True
            tubal_test_type = TubalTestType.HSG
            recommendations.append("HSG or HyCoSy for tubal patency assessment")

        if male_factor_present:
            recommendations.append("Urological referral for semen analysis abnormalities")

        if pcos.calculated_diagnosis:
            recommendations.append("PCOS management protocol: First-line ovulation induction")
            recommendations.append(
                f"Lifestyle modification (weight loss if BMI >{t.bmi_normal_max:g})"
            )

        if older:
            dfsh = True
            recommendations.append("Baseline FSH for ovarian reserve assessment (if not done)")

        if is_present(afc_total) and afc_total < t.poor_reserve_afc:
            recommendations.append("Poor ovarian reserve indicated - Consider early IVF")
            recommendations.append("Discuss expectations regarding treatment success")

        return RCOGRecommendations(
            recommendations=tuple(recommendations),
            urgency=urgency,
            reasons_for_urgency=tuple(reasons) if reasons else None,
            next_steps=NextSteps(
                tubal_test=tubal_test,
                tubal_test_type=tubal_test_type,
                dfsh=dfsh,
                male_factor=bool(male_factor_present),
            ),
        )


def generate_rcog_recommendations(
    age: Optional[float],
    duration: Optional[float],
    male_factor_present: bool,
    pcos: PCOSResult,
    tubal_pathology: bool,
    afc_total: Optional[float],
    thresholds: Optional[ClinicalThresholds] = None,
) -> RCOGRecommendations:
    """Generate RCOG recommendations with the given (or configured) thresholds."""
    return RCOGRecommendationEngine(thresholds).generate(
        age, duration, male_factor_present, pcos, tubal_pathology, afc_total,
    )

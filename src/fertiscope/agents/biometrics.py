"""
BMI and LH:FSH interpreters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fertiscope.config import BMICategory, ClinicalThresholds, get_config
from fertiscope.utils.values import is_positive, is_present


class LHFSHInterpretation(str, Enum):
    """LH:FSH ratio interpretation."""
    PCOS_SUGGESTIVE = "PCOS-suggestive (LH:FSH > 2:1)"
    NORMAL = "Normal LH:FSH ratio"
    CANNOT_CALCULATE = "Cannot calculate"


class IndicatorSeverity(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class BMIIndicator:
    """Display hints for the BMI badge."""
    severity: IndicatorSeverity
    message: str
    recommendation: str = ""


@dataclass(frozen=True)
class BMIResult:
    """Body mass index and band."""
    bmi: float
    category: BMICategory

    @property
    def is_available(self) -> bool:
        return self.category != BMICategory.NOT_AVAILABLE

    def indicator(self, thresholds: Optional[ClinicalThresholds] = None) -> BMIIndicator:
        """Severity, message and counselling hint for this BMI.

        Banded on the rounded value shown in the message.
        """
        if not self.is_available:
            return BMIIndicator(IndicatorSeverity.SAFE, "Enter weight and height")

        bmi = self.bmi
        band = _bmi_band(bmi, thresholds or get_config().clinical)
        if band == BMICategory.UNDERWEIGHT:
            return BMIIndicator(
                IndicatorSeverity.WARNING, f"Low BMI ({bmi:.1f})",
                "Nutritional counseling recommended",
            )
        if band == BMICategory.NORMAL:
            return BMIIndicator(IndicatorSeverity.SAFE, f"Optimal BMI ({bmi:.1f})")
        if band == BMICategory.OVERWEIGHT:
            return BMIIndicator(
                IndicatorSeverity.WARNING, f"Overweight ({bmi:.1f})",
                "Weight loss recommended (5-10%)",
            )
        if band == BMICategory.OBESE_CLASS_I:
            return BMIIndicator(
                IndicatorSeverity.CRITICAL, f"Obese ({bmi:.1f})",
                "Significant weight loss needed before IVF stimulation",
            )
        return BMIIndicator(
            IndicatorSeverity.CRITICAL, f"Severe Obesity ({bmi:.1f})",
            "Delay treatment - intensive weight management program essential",
        )

    def to_dict(self) -> dict:
        return {'bmi': self.bmi, 'category': self.category.value}


@dataclass(frozen=True)
class LHFSHResult:
    """LH:FSH ratio."""
    ratio: float
    interpretation: LHFSHInterpretation

    def to_dict(self) -> dict:
        return {'ratio': self.ratio, 'interpretation': self.interpretation.value}


def calculate_bmi(
    weight: Optional[float] = None,
    height: Optional[float] = None,
    thresholds: Optional[ClinicalThresholds] = None,
) -> BMIResult:
    """
    Calculate BMI from weight (kg) and height (cm).

    The band is chosen from the unrounded value; the reported BMI is
    rounded to one decimal.
    """
    if not (is_positive(weight) and is_positive(height)):
        return BMIResult(bmi=0.0, category=BMICategory.NOT_AVAILABLE)

    t = thresholds or get_config().clinical
    height_m = height / 100
    bmi = weight / (height_m * height_m)
    return BMIResult(bmi=round(bmi, 1), category=_bmi_band(bmi, t))


def _bmi_band(bmi: float, t: ClinicalThresholds) -> BMICategory:
    if bmi < t.bmi_underweight_max:
        return BMICategory.UNDERWEIGHT
    if bmi < t.bmi_normal_max:
        return BMICategory.NORMAL
    if bmi < t.bmi_overweight_max:
        return BMICategory.OVERWEIGHT
    if bmi < t.bmi_obese_class_i_max:
        return BMICategory.OBESE_CLASS_I
    return BMICategory.OBESE_CLASS_II


def calculate_lh_fsh_ratio(
    lh: Optional[float] = None,
    fsh: Optional[float] = None,
    thresholds: Optional[ClinicalThresholds] = None,
) -> LHFSHResult:
    """Day 2-3 LH:FSH ratio; above the cutoff is PCOS-suggestive."""
    if not (is_present(lh) and is_positive(fsh)):
        return LHFSHResult(ratio=0.0, interpretation=LHFSHInterpretation.CANNOT_CALCULATE)

    t = thresholds or get_config().clinical
    ratio = lh / fsh
    if ratio > t.lh_fsh_ratio_cutoff:
        interpretation = LHFSHInterpretation.PCOS_SUGGESTIVE
    else:
        interpretation = LHFSHInterpretation.NORMAL
    return LHFSHResult(ratio=ratio, interpretation=interpretation)

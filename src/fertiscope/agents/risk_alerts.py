"""
Risk alert generation for fertility assessments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fertiscope.agents.pcos import PCOSResult
from fertiscope.agents.semen import SemenClassification
from fertiscope.config import AlertSeverity, AlertType, ClinicalThresholds, get_config
from fertiscope.utils.values import is_positive, is_present


@dataclass(frozen=True)
class RiskAlert:
    """Individual risk alert."""
    type: AlertType
    severity: AlertSeverity
    message: str
    action: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'severity': self.severity.value,
            'message': self.message,
            'action': self.action,
        }


class RiskAlertGenerator:
    """
    Severity-tagged risk alert generator.

    Conditions are checked in a fixed order and every one that holds adds
    an alert; the output order is the evaluation order.
    """

    def __init__(self, thresholds: Optional[ClinicalThresholds] = None):
        self.thresholds = thresholds or get_config().clinical

    def generate(
        self,
        age: Optional[float],
        bmi: Optional[float],
        duration: Optional[float],
        pcos: PCOSResult,
        male_factor: SemenClassification,
        tubal_pathology: bool,
        endometriosis_risk: bool,
    ) -> tuple[RiskAlert, ...]:
        """
        Generate alerts for one assessment.

        Args:
            age: Female age in years
            bmi: Body mass index; 0 is the "not available" sentinel
            duration: Infertility duration in years
            pcos: Rotterdam evaluation
            male_factor: Semen classification
            tubal_pathology: Tubal blockage or hydrosalpinx found
            endometriosis_risk: Endometriosis risk factors present

        Returns:
            Ordered tuple of RiskAlert
        """
        t = self.thresholds
        alerts = []

        if is_present(age) and age > t.alert_age:
            alerts.append(RiskAlert(
                AlertType.AGE, AlertSeverity.WARNING,
                f"Advanced maternal age ({age:g} years) - Consider expedited evaluation",
                "Recommend timely treatment planning",
            ))

        if is_positive(bmi):
            if bmi > t.bmi_overweight_max:
                alerts.append(RiskAlert(
                    AlertType.BMI, AlertSeverity.WARNING,
                    f"Elevated BMI ({bmi:.1f}) - Weight reduction recommended before IVF",
                    f"Counsel on lifestyle modification, consider delayed stimulation "
                    f"if BMI > {t.bmi_obese_class_i_max:g}",
                ))
            elif bmi < t.bmi_underweight_max:
                alerts.append(RiskAlert(
                    AlertType.BMI, AlertSeverity.INFO,
                    f"Low BMI ({bmi:.1f}) - Ensure adequate nutrition",
                    "Nutritional counseling",
                ))

        if is_present(duration) and duration > t.alert_duration_years:
            alerts.append(RiskAlert(
                AlertType.DURATION, AlertSeverity.WARNING,
                f"Long infertility duration ({duration:g} years) - Expedited workup recommended",
                "Complete full investigation without delay",
            ))

        if pcos.calculated_diagnosis:
            alerts.append(RiskAlert(
                AlertType.PCOS, AlertSeverity.WARNING,
                f"PCOS diagnosis ({pcos.criteria_met_count}/3 Rotterdam criteria met) "
                f"- PCOS management protocol",
                "Consider metformin, diet/exercise, low-dose gonadotropins if ovulation needed",
            ))

        if male_factor.is_abnormal:
            if male_factor.icsi_indicated:
                severity, action = AlertSeverity.CRITICAL, "ICSI strongly indicated"
            else:
                severity, action = AlertSeverity.WARNING, "Urological referral recommended"
            alerts.append(RiskAlert(
                AlertType.MALE_FACTOR, severity,
                f"Abnormal semen analysis: {male_factor.diagnosis.value}",
                action,
            ))

        if tubal_pathology:
            alerts.append(RiskAlert(
                AlertType.TUBAL, AlertSeverity.WARNING,
                "Tubal pathology detected - Surgical intervention may be needed",
                "Discuss surgical options vs. direct IVF",
            ))

        if endometriosis_risk:
            alerts.append(RiskAlert(
                AlertType.ENDOMETRIOSIS, AlertSeverity.INFO,
                "Risk factors for endometriosis identified",
                "Consider laparoscopy if diagnosis uncertain",
            ))

        return tuple(alerts)


def generate_risk_alerts(
    age: Optional[float],
    bmi: Optional[float],
    duration: Optional[float],
    pcos: PCOSResult,
    male_factor: SemenClassification,
    tubal_pathology: bool,
    endometriosis_risk: bool,
    thresholds: Optional[ClinicalThresholds] = None,
) -> tuple[RiskAlert, ...]:
    """Generate the ordered risk alert list."""
    return RiskAlertGenerator(thresholds).generate(
        age, bmi, duration, pcos, male_factor, tubal_pathology, endometriosis_risk,
    )

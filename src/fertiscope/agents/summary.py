"""
Diagnostic summary assembler for FertiScope.

Runs every interpreter over one clinical assessment and composes the
results, together with the raw observation snapshots, into a single
immutable summary for display, printing and storage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from fertiscope.agents.biometrics import BMIResult, LHFSHResult, calculate_bmi, calculate_lh_fsh_ratio
from fertiscope.agents.pcos import PCOSResult, evaluate_pcos
from fertiscope.agents.rcog import RCOGRecommendationEngine, RCOGRecommendations
from fertiscope.agents.risk_alerts import RiskAlert, RiskAlertGenerator
from fertiscope.agents.semen import SemenAnalysisClassifier, SemenClassification, TMSCResult
from fertiscope.config import ClinicalThresholds, SemenDiagnosis, get_config
from fertiscope.models.observations import (
    ClinicalAssessment,
    EndocrineProfile,
    HSGFinding,
    InfertilityHistory,
    MenstrualPattern,
    OvarianReserveAssessment,
    SemenObservation,
    UltrasoundFindings,
    Vitals,
)
from fertiscope.utils.values import is_present

logger = logging.getLogger(__name__)

_ANOVULATORY_PATTERNS = (MenstrualPattern.OLIGOMENORRHEA, MenstrualPattern.AMENORRHEA)


@dataclass(frozen=True)
class DiagnosticFindings:
    """Infertility factors identified in one assessment."""
    pcos: PCOSResult
    male_factor_diagnosis: SemenDiagnosis
    uterine_tubal_factors: tuple[str, ...] = ()
    ovulation_disorder: bool = False
    unexplained: bool = False
    combined_factors: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiagnosticSummary:
    """Complete output of one decision-support pass."""

    # Header
    patient_id: str
    assessment_date: date

    # Interpretations
    vitals: Vitals
    bmi: BMIResult
    lh_fsh: LHFSHResult
    tmsc: TMSCResult
    male_factor: SemenClassification
    pcos: PCOSResult
    findings: DiagnosticFindings
    risk_alerts: tuple[RiskAlert, ...]
    rcog_recommendations: RCOGRecommendations

    # Derived flags fed into the alert and recommendation rules
    tubal_pathology: bool
    endometriosis_risk: bool
    afc_total: Optional[float]

    # Raw observation snapshots
    history: InfertilityHistory
    endocrine: EndocrineProfile
    ovarian_reserve: OvarianReserveAssessment
    ultrasound: UltrasoundFindings
    semen: SemenObservation

    clinical_notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        from fertiscope.schemas import summary_to_dict
        return summary_to_dict(self)

    def to_json(self) -> str:
        from fertiscope.schemas import summary_to_json
        return summary_to_json(self)


class DiagnosticSummaryAssembler:
    """
    Composes every interpreter into a diagnostic summary.

    Stateless: each call recomputes the whole summary from the
    assessment it is given.

    Attributes:
        thresholds: Clinical threshold configuration
    """

    def __init__(self, thresholds: Optional[ClinicalThresholds] = None):
        """
        Initialize the assembler.

        Args:
            thresholds: Clinical thresholds (uses config defaults if None)
        """
        self.thresholds = thresholds or get_config().clinical
        self.semen_classifier = SemenAnalysisClassifier(self.thresholds)
        self.alert_generator = RiskAlertGenerator(self.thresholds)
        self.rcog_engine = RCOGRecommendationEngine(self.thresholds)

    def assemble(self, assessment: ClinicalAssessment) -> DiagnosticSummary:
        """
        Evaluate an assessment and build its summary.

        Args:
            assessment: Observations recorded for one patient visit

        Returns:
            DiagnosticSummary
        """
        t = self.thresholds
        vitals = assessment.vitals
        semen = assessment.semen
        duration = assessment.history.duration

        bmi = calculate_bmi(vitals.weight, vitals.height, thresholds=t)
        lh_fsh = calculate_lh_fsh_ratio(
            assessment.endocrine.day2_3_lh, assessment.endocrine.day2_3_fsh, thresholds=t,
        )
        male_factor = self.semen_classifier.classify_observation(semen)
        tmsc = self.semen_classifier.calculate_tmsc(
            semen.volume, semen.concentration, semen.motility_progressive,
        )
        pcos = evaluate_pcos(assessment.pcos, thresholds=t)

        tubal_pathology = self._has_tubal_pathology(assessment.ultrasound)
        endometriosis_risk = self._has_endometriosis_risk(assessment)
        afc_total = self._total_afc(assessment.ovarian_reserve)

        alerts = self.alert_generator.generate(
            vitals.age, bmi.bmi, duration, pcos, male_factor,
            tubal_pathology, endometriosis_risk,
        )
        recommendations = self.rcog_engine.generate(
            vitals.age, duration, male_factor.is_abnormal, pcos,
            tubal_pathology, afc_total,
        )
        findings = self._build_findings(
            assessment, pcos, male_factor, endometriosis_risk, afc_total,
        )

        logger.debug(
            "Assembled summary for patient %s: semen=%s pcos=%d/3 alerts=%d urgency=%s",
            assessment.patient_id, male_factor.diagnosis.value,
            pcos.criteria_met_count, len(alerts), recommendations.urgency.value,
        )

        return DiagnosticSummary(
            patient_id=assessment.patient_id,
            assessment_date=assessment.assessment_date,
            vitals=vitals,
            bmi=bmi,
            lh_fsh=lh_fsh,
            tmsc=tmsc,
            male_factor=male_factor,
            pcos=pcos,
            findings=findings,
            risk_alerts=alerts,
            rcog_recommendations=recommendations,
            tubal_pathology=tubal_pathology,
            endometriosis_risk=endometriosis_risk,
            afc_total=afc_total,
            history=assessment.history,
            endocrine=assessment.endocrine,
            ovarian_reserve=assessment.ovarian_reserve,
            ultrasound=assessment.ultrasound,
            semen=semen,
            clinical_notes=assessment.clinical_notes,
        )

    @staticmethod
    def _has_tubal_pathology(ultrasound: UltrasoundFindings) -> bool:
        hsg = ultrasound.tubal_assessment.hsg_findings
        return hsg in (HSGFinding.BLOCKED, HSGFinding.HYDROSALPINX) or ultrasound.hydrosalpinx

    @staticmethod
    def _has_endometriosis_risk(assessment: ClinicalAssessment) -> bool:
        if assessment.ultrasound.ovarian_pathology.endometrioma:
            return True
        history = assessment.history.medical_history + assessment.history.surgical_history
        return any("endometriosis" in entry.lower() for entry in history)

    @staticmethod
    def _total_afc(reserve: OvarianReserveAssessment) -> Optional[float]:
        sides = [n for n in (reserve.afc_right, reserve.afc_left) if is_present(n)]
        if sides:
            return sum(sides)
        if is_present(reserve.total_afc):
            return reserve.total_afc
        return None

    def _build_findings(
        self,
        assessment: ClinicalAssessment,
        pcos: PCOSResult,
        male_factor: SemenClassification,
        endometriosis_risk: bool,
        afc_total: Optional[float],
    ) -> DiagnosticFindings:
        """Collect infertility factors and decide whether infertility is unexplained."""
        ultrasound = assessment.ultrasound
        uterus = ultrasound.uterine_pathology

        uterine_tubal = [
            name for present, name in (
                (uterus.fibroids, "Fibroids"),
                (uterus.polyps, "Endometrial polyps"),
                (uterus.adhesions, "Intrauterine adhesions"),
                (uterus.septate, "Septate uterus"),
                (uterus.unicornuate, "Unicornuate uterus"),
            )
            if present
        ]
        hsg = ultrasound.tubal_assessment.hsg_findings
        if hsg == HSGFinding.BLOCKED:
            uterine_tubal.append("Tubal blockage")
        if hsg == HSGFinding.HYDROSALPINX or ultrasound.hydrosalpinx:
            uterine_tubal.append("Hydrosalpinx")

        ovulation_disorder = (
            pcos.oligo_anovulation
            or assessment.history.menstrual_pattern in _ANOVULATORY_PATTERNS
        )

        factors = []
        if ovulation_disorder or pcos.calculated_diagnosis:
            factors.append("Ovulatory")
        if male_factor.is_abnormal:
            factors.append("Male factor")
        if uterine_tubal:
            factors.append("Uterine/Tubal")
        if endometriosis_risk:
            factors.append("Endometriosis")
        if afc_total is not None and afc_total < self.thresholds.poor_reserve_afc:
            factors.append("Ovarian reserve")

        # Unexplained needs a complete semen analysis and a documented tubal test
        tubal_assessed = hsg is not None or bool(ultrasound.tubal_assessment.hycosy)
        unexplained = (
            not factors
            and male_factor.diagnosis == SemenDiagnosis.NORMAL
            and tubal_assessed
        )

        return DiagnosticFindings(
            pcos=pcos,
            male_factor_diagnosis=male_factor.diagnosis,
            uterine_tubal_factors=tuple(uterine_tubal),
            ovulation_disorder=ovulation_disorder,
            unexplained=unexplained,
            combined_factors=tuple(factors) if len(factors) >= 2 else (),
        )


def assemble_diagnostic_summary(
    assessment: ClinicalAssessment,
    thresholds: Optional[ClinicalThresholds] = None,
) -> DiagnosticSummary:
    """Build the diagnostic summary for one assessment."""
    return DiagnosticSummaryAssembler(thresholds).assemble(assessment)

"""Tests for the diagnostic summary assembler."""

from dataclasses import FrozenInstanceError, replace

import pytest

from fertiscope.agents.summary import DiagnosticSummaryAssembler, assemble_diagnostic_summary
from fertiscope.config import AlertType, BMICategory, ClinicalThresholds, SemenDiagnosis, Urgency
from fertiscope.models import (
    HSGFinding,
    InfertilityHistory,
    MenstrualPattern,
    OvarianPathology,
    OvarianReserveAssessment,
    PCOSObservation,
    SemenObservation,
    TubalAssessment,
    UltrasoundFindings,
    UterinePathology,
    Vitals,
)


class TestAssembler:

    def test_normal_assessment(self, normal_assessment):
        summary = assemble_diagnostic_summary(normal_assessment)

        assert summary.patient_id == "P-001"
        assert summary.bmi.category == BMICategory.NORMAL
        assert summary.male_factor.diagnosis == SemenDiagnosis.NORMAL
        assert summary.tmsc.tmsc == pytest.approx(66.0)
        assert summary.pcos.criteria_met_count == 0
        assert summary.risk_alerts == ()
        assert summary.rcog_recommendations.urgency == Urgency.ROUTINE
        assert summary.afc_total == 13
        assert summary.tubal_pathology is False
        assert summary.endometriosis_risk is False

    def test_snapshots_are_composed(self, normal_assessment):
        summary = assemble_diagnostic_summary(normal_assessment)
        assert summary.semen == normal_assessment.semen
        assert summary.history == normal_assessment.history
        assert summary.endocrine == normal_assessment.endocrine
        assert summary.ovarian_reserve == normal_assessment.ovarian_reserve
        assert summary.ultrasound == normal_assessment.ultrasound

    def test_summary_is_immutable(self, normal_assessment):
        summary = assemble_diagnostic_summary(normal_assessment)
        with pytest.raises(FrozenInstanceError):
            summary.patient_id = "other"

    def test_idempotent(self, normal_assessment):
        assert assemble_diagnostic_summary(normal_assessment) == assemble_diagnostic_summary(normal_assessment)

    def test_complex_case(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            vitals=Vitals(age=42, weight=95, height=175),
            history=InfertilityHistory(duration=4),
            semen=SemenObservation(volume=2.0, concentration=10.0, motility_progressive=30.0, morphology=2.0),
            pcos=PCOSObservation(oligo_anovulation=True, clinical_hyperandrogenism=True),
            ovarian_reserve=OvarianReserveAssessment(afc_right=2, afc_left=1),
            ultrasound=UltrasoundFindings(
                tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.BLOCKED),
                ovarian_pathology=OvarianPathology(endometrioma=True),
            ),
        )
        summary = assemble_diagnostic_summary(assessment)

        assert [a.type for a in summary.risk_alerts] == [
            AlertType.AGE,
            AlertType.BMI,
            AlertType.DURATION,
            AlertType.PCOS,
            AlertType.MALE_FACTOR,
            AlertType.TUBAL,
            AlertType.ENDOMETRIOSIS,
        ]
        rcog = summary.rcog_recommendations
        assert rcog.urgency == Urgency.URGENT
        # Known tubal pathology skips the patency test
        assert rcog.next_steps.tubal_test is False
        assert rcog.next_steps.male_factor is True
        assert summary.afc_total == 3
        assert summary.findings.combined_factors == (
            "Ovulatory", "Male factor", "Uterine/Tubal", "Endometriosis", "Ovarian reserve",
        )

    def test_missing_data_is_neutral(self):
        from datetime import date
        from fertiscope.models import ClinicalAssessment

        summary = assemble_diagnostic_summary(ClinicalAssessment(patient_id="P-002", assessment_date=date(2026, 1, 5)))
        assert summary.bmi.category == BMICategory.NOT_AVAILABLE
        assert summary.male_factor.diagnosis == SemenDiagnosis.INCOMPLETE
        assert summary.risk_alerts == ()
        assert summary.rcog_recommendations.recommendations == ()
        assert summary.afc_total is None
        assert summary.findings.unexplained is False

    def test_custom_thresholds_flow_through(self, normal_assessment):
        assembler = DiagnosticSummaryAssembler(ClinicalThresholds(alert_age=25.0))
        summary = assembler.assemble(normal_assessment)
        assert [a.type for a in summary.risk_alerts] == [AlertType.AGE]


class TestDerivedFlags:

    def test_hydrosalpinx_flag_is_tubal_pathology(self, normal_assessment):
        assessment = replace(normal_assessment, ultrasound=UltrasoundFindings(hydrosalpinx=True))
        summary = assemble_diagnostic_summary(assessment)
        assert summary.tubal_pathology is True
        assert summary.findings.uterine_tubal_factors == ("Hydrosalpinx",)

    def test_patent_tubes_not_pathology(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ultrasound=UltrasoundFindings(tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.PATENT)),
        )
        assert assemble_diagnostic_summary(assessment).tubal_pathology is False

    def test_endometriosis_from_history(self, normal_assessment):
        assessment = replace(normal_assessment, history=InfertilityHistory(duration=0.5, surgical_history=("Laparoscopy for Endometriosis",)))
        assert assemble_diagnostic_summary(assessment).endometriosis_risk is True

    def test_total_afc_fallback(self, normal_assessment):
        assessment = replace(normal_assessment, ovarian_reserve=OvarianReserveAssessment(total_afc=9))
        assert assemble_diagnostic_summary(assessment).afc_total == 9


class TestFindings:

    def test_unexplained_needs_tubal_test(self, normal_assessment):
        summary = assemble_diagnostic_summary(normal_assessment)
        assert summary.findings.unexplained is False

        assessment = replace(
            normal_assessment,
            ultrasound=UltrasoundFindings(tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.PATENT)),
        )
        assert assemble_diagnostic_summary(assessment).findings.unexplained is True

    def test_endometriosis_risk_is_not_unexplained(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ultrasound=UltrasoundFindings(
                tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.PATENT),
                ovarian_pathology=OvarianPathology(endometrioma=True),
            ),
        )
        summary = assemble_diagnostic_summary(assessment)
        assert [a.type for a in summary.risk_alerts] == [AlertType.ENDOMETRIOSIS]
        assert summary.findings.unexplained is False
        assert summary.findings.combined_factors == ()

    def test_poor_reserve_is_not_unexplained(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ovarian_reserve=OvarianReserveAssessment(afc_right=1, afc_left=2),
            ultrasound=UltrasoundFindings(tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.PATENT)),
        )
        summary = assemble_diagnostic_summary(assessment)
        assert "Poor ovarian reserve indicated - Consider early IVF" in summary.rcog_recommendations.recommendations
        assert summary.findings.unexplained is False

    def test_reserve_and_endometriosis_combine(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            history=InfertilityHistory(duration=0.5, medical_history=("Endometriosis stage II",)),
            ovarian_reserve=OvarianReserveAssessment(total_afc=4),
        )
        findings = assemble_diagnostic_summary(assessment).findings
        assert findings.combined_factors == ("Endometriosis", "Ovarian reserve")

    def test_reserve_at_cutoff_is_not_a_factor(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ovarian_reserve=OvarianReserveAssessment(afc_right=3, afc_left=2),
            ultrasound=UltrasoundFindings(tubal_assessment=TubalAssessment(hsg_done=True, hsg_findings=HSGFinding.PATENT)),
        )
        assert assemble_diagnostic_summary(assessment).findings.unexplained is True

    def test_ovulation_disorder_from_menstrual_pattern(self, normal_assessment):
        assessment = replace(normal_assessment, history=InfertilityHistory(duration=0.5, menstrual_pattern=MenstrualPattern.AMENORRHEA))
        findings = assemble_diagnostic_summary(assessment).findings
        assert findings.ovulation_disorder is True
        assert findings.combined_factors == ()

    def test_uterine_factors(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ultrasound=UltrasoundFindings(uterine_pathology=UterinePathology(fibroids=True, septate=True)),
        )
        findings = assemble_diagnostic_summary(assessment).findings
        assert findings.uterine_tubal_factors == ("Fibroids", "Septate uterus")

    def test_every_uterine_factor_is_named(self, normal_assessment):
        assessment = replace(
            normal_assessment,
            ultrasound=UltrasoundFindings(uterine_pathology=UterinePathology(
                fibroids=True, polyps=True, adhesions=True, septate=True, unicornuate=True,
            )),
        )
        findings = assemble_diagnostic_summary(assessment).findings
        assert findings.uterine_tubal_factors == (
            "Fibroids", "Endometrial polyps", "Intrauterine adhesions", "Septate uterus", "Unicornuate uterus",
        )

"""
Plain-text clinical report rendering.
"""

from __future__ import annotations

from fertiscope.agents.summary import DiagnosticFindings, DiagnosticSummary
from fertiscope.config import SemenDiagnosis

NO_ABNORMALITIES = "No abnormalities identified"


def format_findings_summary(findings: DiagnosticFindings) -> str:
    """One check-marked line per identified factor."""
    lines = []

    if findings.pcos.calculated_diagnosis:
        lines.append(f"✓ PCOS ({findings.pcos.criteria_met_count}/3 Rotterdam criteria)")

    if findings.male_factor_diagnosis not in (SemenDiagnosis.NORMAL, SemenDiagnosis.INCOMPLETE):
        lines.append(f"✓ Male Factor: {findings.male_factor_diagnosis.value}")

    if findings.uterine_tubal_factors:
        lines.append(f"✓ Uterine/Tubal: {', '.join(findings.uterine_tubal_factors)}")

    if findings.ovulation_disorder:
        lines.append("✓ Ovulation Disorder")

    if findings.unexplained:
        lines.append("✓ Unexplained Infertility")

    if findings.combined_factors:
        lines.append(f"✓ Combined Factors: {', '.join(findings.combined_factors)}")

    return "\n".join(lines) if lines else NO_ABNORMALITIES


class ClinicalReportGenerator:
    """
    Renders a diagnostic summary as a clinician-readable text report.

    The text is handed to the print layer; no layout or PDF work happens here.
    """

    def render_text(self, summary: DiagnosticSummary) -> str:
        sections = [
            f"Patient: {summary.patient_id}",
            f"Assessment date: {summary.assessment_date.isoformat()}",
            "",
            "Diagnostic findings:",
            format_findings_summary(summary.findings),
            "",
            self._render_measurements(summary),
        ]

        if summary.risk_alerts:
            sections += ["", "Risk alerts:"]
            for alert in summary.risk_alerts:
                line = f"[{alert.severity.value}] {alert.message}"
                if alert.action:
                    line += f" -> {alert.action}"
                sections.append(line)

        rcog = summary.rcog_recommendations
        sections += ["", f"Urgency: {rcog.urgency.value}"]
        if rcog.reasons_for_urgency:
            sections.append(f"Reasons: {'; '.join(rcog.reasons_for_urgency)}")
        for i, rec in enumerate(rcog.recommendations, 1):
            sections.append(f"{i}. {rec}")

        if summary.clinical_notes:
            sections += ["", f"Notes: {summary.clinical_notes}"]

        return "\n".join(sections)

    def _render_measurements(self, summary: DiagnosticSummary) -> str:
        bmi = summary.bmi
        bmi_text = f"{bmi.bmi:.1f} ({bmi.category.value})" if bmi.is_available else bmi.category.value
        lines = [
            f"BMI: {bmi_text}",
            f"LH:FSH: {summary.lh_fsh.interpretation.value}",
            f"Semen analysis: {summary.male_factor.diagnosis.value}"
            + (" - ICSI indicated" if summary.male_factor.icsi_indicated else ""),
            f"TMSC: {summary.tmsc.tmsc:.1f}M - {summary.tmsc.interpretation.value}",
            summary.pcos.indicator_message,
        ]
        if summary.afc_total is not None:
            lines.append(f"AFC total: {summary.afc_total:g}")
        return "\n".join(lines)


def generate_report(summary: DiagnosticSummary) -> str:
    """Render a summary with the default generator."""
    return ClinicalReportGenerator().render_text(summary)

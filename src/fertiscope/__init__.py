"""
FertiScope: Clinical Decision Support for Fertility Assessment

Turns fertility work-up observations (semen analysis, hormones,
biometrics, ultrasound, Rotterdam criteria) into diagnoses, risk alerts
and RCOG-guided recommendations.
"""

__version__ = "0.1.0"
__author__ = "FertiScope Team"

from fertiscope.config import ClinicalThresholds, Config, get_config, set_config
from fertiscope.agents import (
    assemble_diagnostic_summary,
    calculate_bmi,
    calculate_lh_fsh_ratio,
    calculate_pcos_criteria,
    calculate_tmsc,
    classify_semen_analysis,
    generate_rcog_recommendations,
    generate_risk_alerts,
)


def get_summary_assembler():
    """Get the diagnostic summary assembler class."""
    from fertiscope.agents.summary import DiagnosticSummaryAssembler
    return DiagnosticSummaryAssembler


__all__ = [
    "ClinicalThresholds",
    "Config",
    "get_config",
    "set_config",
    "classify_semen_analysis",
    "calculate_tmsc",
    "calculate_bmi",
    "calculate_lh_fsh_ratio",
    "calculate_pcos_criteria",
    "generate_risk_alerts",
    "generate_rcog_recommendations",
    "assemble_diagnostic_summary",
    "get_summary_assembler",
    "__version__",
]

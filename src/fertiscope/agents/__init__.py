"""Clinical decision support agents for FertiScope."""

from fertiscope.agents.semen import (
    SemenAnalysisClassifier,
    SemenClassification,
    TMSCResult,
    classify_semen_analysis,
    calculate_tmsc,
)
from fertiscope.agents.biometrics import (
    BMIResult,
    LHFSHResult,
    calculate_bmi,
    calculate_lh_fsh_ratio,
)
from fertiscope.agents.pcos import (
    PCOSResult,
    calculate_pcos_criteria,
    evaluate_pcos,
)
from fertiscope.agents.risk_alerts import (
    RiskAlert,
    RiskAlertGenerator,
    generate_risk_alerts,
)
from fertiscope.agents.rcog import (
    NextSteps,
    RCOGRecommendationEngine,
    RCOGRecommendations,
    generate_rcog_recommendations,
)
from fertiscope.agents.summary import (
    DiagnosticFindings,
    DiagnosticSummary,
    DiagnosticSummaryAssembler,
    assemble_diagnostic_summary,
)

__all__ = [
    # Male factor
    "SemenAnalysisClassifier",
    "SemenClassification",
    "TMSCResult",
    "classify_semen_analysis",
    "calculate_tmsc",
    # Biometrics
    "BMIResult",
    "LHFSHResult",
    "calculate_bmi",
    "calculate_lh_fsh_ratio",
    # PCOS
    "PCOSResult",
    "calculate_pcos_criteria",
    "evaluate_pcos",
    # Alerts and recommendations
    "RiskAlert",
    "RiskAlertGenerator",
    "generate_risk_alerts",
    "NextSteps",
    "RCOGRecommendationEngine",
    "RCOGRecommendations",
    "generate_rcog_recommendations",
    # Summary
    "DiagnosticFindings",
    "DiagnosticSummary",
    "DiagnosticSummaryAssembler",
    "assemble_diagnostic_summary",
]

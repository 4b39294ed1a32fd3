"""Clinical observation records for FertiScope."""

from fertiscope.models.observations import (
    ClinicalAssessment,
    EndocrineProfile,
    EndometriumPattern,
    HSGFinding,
    InfertilityHistory,
    InfertilityType,
    LifestyleFactors,
    MenstrualPattern,
    ObstetricHistory,
    OvarianPathology,
    OvarianReserveAssessment,
    OvarianReserveInterpretation,
    PCOSObservation,
    SemenObservation,
    TubalAssessment,
    UltrasoundFindings,
    UterinePathology,
    Vitals,
)

__all__ = [
    # Inputs
    "ClinicalAssessment",
    "Vitals",
    "InfertilityHistory",
    "ObstetricHistory",
    "LifestyleFactors",
    "EndocrineProfile",
    "OvarianReserveAssessment",
    "UltrasoundFindings",
    "UterinePathology",
    "OvarianPathology",
    "TubalAssessment",
    "SemenObservation",
    "PCOSObservation",
    # Vocabularies
    "InfertilityType",
    "MenstrualPattern",
    "EndometriumPattern",
    "HSGFinding",
    "OvarianReserveInterpretation",
]

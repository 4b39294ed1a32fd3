"""Test configuration and fixtures"""

from datetime import date

import pytest

from fertiscope.config import ClinicalThresholds, Config, set_config
from fertiscope.models import (
    ClinicalAssessment,
    EndocrineProfile,
    InfertilityHistory,
    OvarianReserveAssessment,
    PCOSObservation,
    SemenObservation,
    Vitals,
)


@pytest.fixture(autouse=True)
def default_config():
    """Pin the global config to defaults so env files cannot leak in."""
    set_config(Config())
    yield
    set_config(None)


@pytest.fixture
def thresholds():
    return ClinicalThresholds()


@pytest.fixture
def normal_assessment():
    """A work-up with no abnormal finding and no tubal test yet."""
    return ClinicalAssessment(
        patient_id="P-001",
        assessment_date=date(2026, 3, 14),
        vitals=Vitals(age=30, weight=60, height=165),
        history=InfertilityHistory(duration=0.5),
        endocrine=EndocrineProfile(day2_3_fsh=6.0, day2_3_lh=5.0),
        ovarian_reserve=OvarianReserveAssessment(amh=2.5, afc_right=7, afc_left=6),
        semen=SemenObservation(
            volume=3.0, concentration=40.0, total_count=120.0,
            motility_progressive=55.0, morphology=6.0,
        ),
        pcos=PCOSObservation(),
    )

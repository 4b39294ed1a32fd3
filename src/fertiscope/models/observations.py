"""
Clinical observation records.

Every measurement is optional; interpreters decide what to do with
missing values. Records are frozen so a summary can hold them as
snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class InfertilityType(str, Enum):
    """Primary vs secondary infertility."""
    PRIMARY = "Primary"
    SECONDARY = "Secondary"


class MenstrualPattern(str, Enum):
    """Menstrual history pattern."""
    REGULAR = "Regular"
    IRREGULAR = "Irregular"
    OLIGOMENORRHEA = "Oligomenorrhea"
    AMENORRHEA = "Amenorrhea"


class EndometriumPattern(str, Enum):
    """Ultrasound endometrial pattern."""
    TRILAMINAR = "Trilaminar"
    HOMOGENEOUS = "Homogeneous"
    OTHER = "Other"


class HSGFinding(str, Enum):
    """Hysterosalpingography result."""
    PATENT = "Patent"
    PATENCY_DISPUTED = "Patency_Disputed"
    BLOCKED = "Blocked"
    HYDROSALPINX = "Hydrosalpinx"


class OvarianReserveInterpretation(str, Enum):
    """Clinician's ovarian reserve interpretation."""
    POOR = "Poor"
    NORMAL = "Normal"
    HIGH = "High"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class SemenObservation:
    """Raw semen analysis parameters."""
    volume: Optional[float] = None  # mL
    concentration: Optional[float] = None  # M/mL
    total_count: Optional[float] = None  # M per ejaculate
    motility_progressive: Optional[float] = None  # %
    motility_non_progressive: Optional[float] = None  # %
    morphology: Optional[float] = None  # % normal forms
    ph: Optional[float] = None
    vitality: Optional[float] = None  # %


@dataclass(frozen=True)
class PCOSObservation:
    """Rotterdam criteria inputs."""
    oligo_anovulation: bool = False
    clinical_hyperandrogenism: bool = False
    biochemical_hyperandrogenism: bool = False
    polycystic_ovaries_us: bool = False


@dataclass(frozen=True)
class Vitals:
    """Female partner vitals."""
    age: Optional[float] = None  # years
    weight: Optional[float] = None  # kg
    height: Optional[float] = None  # cm


@dataclass(frozen=True)
class ObstetricHistory:
    gravida: int = 0
    parity: int = 0
    miscarriages: int = 0
    ectopic: bool = False
    molar: bool = False


@dataclass(frozen=True)
class LifestyleFactors:
    smoking: bool = False
    alcohol: bool = False
    exercise: str = ""
    stress: str = ""


@dataclass(frozen=True)
class InfertilityHistory:
    """Couple's infertility history."""
    duration: Optional[float] = None  # years trying to conceive
    type: InfertilityType = InfertilityType.PRIMARY
    menstrual_pattern: MenstrualPattern = MenstrualPattern.REGULAR
    menstrual_cycle_length: Optional[int] = None
    menarche: Optional[int] = None
    obstetric_history: Optional[ObstetricHistory] = None
    medical_history: tuple[str, ...] = ()
    surgical_history: tuple[str, ...] = ()
    lifestyle_factors: LifestyleFactors = field(default_factory=LifestyleFactors)


@dataclass(frozen=True)
class EndocrineProfile:
    """Day 2-3 hormonal profile."""
    day2_3_fsh: Optional[float] = None  # IU/L
    day2_3_lh: Optional[float] = None  # IU/L
    day2_3_e2: Optional[float] = None  # pg/mL
    prolactin: Optional[float] = None
    tsh: Optional[float] = None
    total_testosterone: Optional[float] = None
    free_testosterone: Optional[float] = None
    dheas: Optional[float] = None


@dataclass(frozen=True)
class OvarianReserveAssessment:
    """AMH and antral follicle counts."""
    amh: Optional[float] = None  # ng/mL
    afc_right: Optional[float] = None
    afc_left: Optional[float] = None
    total_afc: Optional[float] = None
    interpretation: OvarianReserveInterpretation = OvarianReserveInterpretation.UNKNOWN


@dataclass(frozen=True)
class UterinePathology:
    fibroids: bool = False
    polyps: bool = False
    adhesions: bool = False
    septate: bool = False
    unicornuate: bool = False


@dataclass(frozen=True)
class OvarianPathology:
    cyst: bool = False
    endometrioma: bool = False
    dermoid: bool = False
    follow_up_us: bool = False


@dataclass(frozen=True)
class TubalAssessment:
    hsg_done: bool = False
    hsg_findings: Optional[HSGFinding] = None
    hycosy: Optional[str] = None


@dataclass(frozen=True)
class UltrasoundFindings:
    """Transvaginal ultrasound and tubal assessment findings."""
    endometrium_thickness: Optional[float] = None  # mm
    endometrium_pattern: Optional[EndometriumPattern] = None
    uterine_pathology: UterinePathology = field(default_factory=UterinePathology)
    ovarian_pathology: OvarianPathology = field(default_factory=OvarianPathology)
    tubal_assessment: TubalAssessment = field(default_factory=TubalAssessment)
    hydrosalpinx: bool = False
    notes: Optional[str] = None


@dataclass(frozen=True)
class ClinicalAssessment:
    """Everything recorded for one assessment pass."""
    patient_id: str
    assessment_date: date
    vitals: Vitals = field(default_factory=Vitals)
    history: InfertilityHistory = field(default_factory=InfertilityHistory)
    endocrine: EndocrineProfile = field(default_factory=EndocrineProfile)
    ovarian_reserve: OvarianReserveAssessment = field(default_factory=OvarianReserveAssessment)
    ultrasound: UltrasoundFindings = field(default_factory=UltrasoundFindings)
    semen: SemenObservation = field(default_factory=SemenObservation)
    pcos: PCOSObservation = field(default_factory=PCOSObservation)
    clinical_notes: Optional[str] = None

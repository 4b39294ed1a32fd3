"""
Configuration management for FertiScope.

Holds the result vocabularies shared across the decision engine and the
clinical threshold table, with environment overrides and validation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from fertiscope.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SemenDiagnosis(str, Enum):
    """Composite semen analysis diagnosis."""
    NORMAL = "Normal"
    OLIGOZOOSPERMIA = "Oligozoospermia"
    ASTHENOZOOSPERMIA = "Asthenozoospermia"
    TERATOZOOSPERMIA = "Teratozoospermia"
    OLIGOASTHENOZOOSPERMIA = "Oligoasthenozoospermia"
    OLIGOTERATOZOOSPERMIA = "Oligoteratozoospermia"
    ASTHENOTERATOZOOSPERMIA = "Asthenoteratozoospermia"
    OAT = "Oligoasthenoteratozoospermia (OAT)"
    INCOMPLETE = "Incomplete data"


class BMICategory(str, Enum):
    """BMI bands."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal Weight"
    OVERWEIGHT = "Overweight"
    OBESE_CLASS_I = "Obese Class I"
    OBESE_CLASS_II = "Obese Class II"
    NOT_AVAILABLE = "N/A"


class AlertType(str, Enum):
    """Risk alert categories."""
    BMI = "BMI"
    AGE = "Age"
    DURATION = "Duration"
    PCOS = "PCOS"
    TUBAL = "Tubal"
    ENDOMETRIOSIS = "Endometriosis"
    MALE_FACTOR = "MaleFactor"
    HORMONAL = "Hormonal"


class AlertSeverity(str, Enum):
    """Risk alert severity."""
    INFO = "Info"
    WARNING = "Warning"
    CRITICAL = "Critical"


class Urgency(str, Enum):
    """RCOG investigation urgency tier."""
    ROUTINE = "Routine"
    EXPEDITED = "Expedited"
    URGENT = "Urgent"


class TubalTestType(str, Enum):
    """Tubal patency test options."""
    HSG = "HSG"
    HYCOSY = "HyCoSy"
    LAPAROSCOPY = "Laparoscopy"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Environment variable {name} must be numeric, got {raw!r}",
            details={"variable": name, "value": raw},
        ) from exc
    logger.debug("Threshold override %s=%s", name, value)
    return value


@dataclass(frozen=True)
class ClinicalThresholds:
    """Clinical threshold table.

    Defaults follow WHO 2021 semen reference limits, the Rotterdam
    consensus, WHO BMI bands and RCOG fertility guidance.
    """
    # WHO 2021 semen lower reference limits
    semen_volume_min: float = 1.4
    semen_concentration_min: float = 16.0
    semen_total_count_min: float = 39.0
    semen_motility_min: float = 42.0
    semen_morphology_min: float = 4.0

    # Concentration (M/mL) below which ICSI is always indicated
    severe_oligozoospermia_cutoff: float = 5.0

    # Total motile sperm count (millions)
    tmsc_adequate_min: float = 5.0

    # Endocrine
    lh_fsh_ratio_cutoff: float = 2.0

    # BMI band upper edges (exclusive)
    bmi_underweight_max: float = 18.5
    bmi_normal_max: float = 25.0
    bmi_overweight_max: float = 30.0
    bmi_obese_class_i_max: float = 35.0

    # Rotterdam 2-of-3 rule
    rotterdam_min_criteria: int = 2

    # Risk alerts
    alert_age: float = 40.0
    alert_duration_years: float = 3.0

    # RCOG investigation pathway
    rcog_expedited_age: float = 35.0
    rcog_urgent_age: float = 40.0
    rcog_expedited_duration_years: float = 2.0
    rcog_tubal_test_duration_years: float = 1.0
    poor_reserve_afc: float = 5.0

    def __post_init__(self):
        bands = (
            self.bmi_underweight_max,
            self.bmi_normal_max,
            self.bmi_overweight_max,
            self.bmi_obese_class_i_max,
        )
        if any(lo >= hi for lo, hi in zip(bands, bands[1:])):
            raise ConfigurationError(
                "BMI band edges must be strictly increasing",
                details={"bands": list(bands)},
            )
        if not 1 <= self.rotterdam_min_criteria <= 3:
            raise ConfigurationError(
                "Rotterdam criteria threshold must be between 1 and 3",
                details={"rotterdam_min_criteria": self.rotterdam_min_criteria},
            )
        if self.rcog_expedited_age > self.rcog_urgent_age:
            raise ConfigurationError(
                "RCOG expedited age cannot exceed urgent age",
                details={
                    "rcog_expedited_age": self.rcog_expedited_age,
                    "rcog_urgent_age": self.rcog_urgent_age,
                },
            )

    @classmethod
    def from_env(cls) -> ClinicalThresholds:
        """Create thresholds from environment variables.

        Each field maps to its upper-cased name prefixed with
        ``FERTISCOPE_``, e.g. ``FERTISCOPE_SEMEN_VOLUME_MIN``.
        """
        values = {}
        for f in fields(cls):
            default = f.default
            name = f"FERTISCOPE_{f.name.upper()}"
            value = _env_float(name, default)
            if isinstance(default, int):
                if not float(value).is_integer():
                    raise ConfigurationError(
                        f"Environment variable {name} must be a whole number, got {value!r}",
                        details={"variable": name, "value": os.getenv(name)},
                    )
                value = int(value)
            values[f.name] = value
        return cls(**values)


@dataclass
class Config:
    """Main configuration container."""
    clinical: ClinicalThresholds = field(default_factory=ClinicalThresholds)

    # Logging
    log_level: str = "INFO"
    log_file_path: Optional[Path] = None

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> Config:
        """
        Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config instance with all settings
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        log_path = os.getenv("LOG_FILE_PATH")

        return cls(
            clinical=ClinicalThresholds.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file_path=Path(log_path) if log_path else None,
        )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Set the global configuration instance (``None`` resets it)."""
    global _config
    _config = config

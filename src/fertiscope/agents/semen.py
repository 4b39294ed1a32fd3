"""
Semen analysis classification against WHO 2021 reference limits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fertiscope.config import ClinicalThresholds, SemenDiagnosis, get_config
from fertiscope.models.observations import SemenObservation
from fertiscope.utils.values import is_present

MISSING_PARAMETERS = "Missing semen analysis parameters"
LOW_VOLUME = "Low Volume"

# Compound label for each pair of abnormality flags (oligo, astheno, terato)
_PAIR_DIAGNOSES = {
    (True, True, False): SemenDiagnosis.OLIGOASTHENOZOOSPERMIA,
    (True, False, True): SemenDiagnosis.OLIGOTERATOZOOSPERMIA,
    (False, True, True): SemenDiagnosis.ASTHENOTERATOZOOSPERMIA,
}


class TMSCInterpretation(str, Enum):
    """Total motile sperm count interpretation."""
    ADEQUATE = "Adequate for IUI/Natural conception"
    ICSI_MAY_BE_INDICATED = "ICSI may be indicated"
    CANNOT_CALCULATE = "Cannot calculate - missing parameters"


@dataclass(frozen=True)
class MaleFactorIndicator:
    """Display hints for the male factor badge."""
    is_abnormal: bool
    requires_icsi: bool
    display_text: str


@dataclass(frozen=True)
class SemenClassification:
    """Composite semen diagnosis."""
    diagnosis: SemenDiagnosis
    icsi_indicated: bool
    findings: tuple[str, ...] = ()

    @property
    def is_abnormal(self) -> bool:
        return self.diagnosis not in (SemenDiagnosis.NORMAL, SemenDiagnosis.INCOMPLETE)

    def indicator(self) -> MaleFactorIndicator:
        return MaleFactorIndicator(
            is_abnormal=self.is_abnormal,
            requires_icsi=self.icsi_indicated,
            display_text=self.diagnosis.value,
        )

    def to_dict(self) -> dict:
        return {
            'diagnosis': self.diagnosis.value,
            'icsi_indicated': self.icsi_indicated,
            'findings': list(self.findings),
        }


@dataclass(frozen=True)
class TMSCResult:
    """Total motile sperm count (millions)."""
    tmsc: float
    interpretation: TMSCInterpretation

    def to_dict(self) -> dict:
        return {'tmsc': self.tmsc, 'interpretation': self.interpretation.value}


class SemenAnalysisClassifier:
    """
    WHO 2021 semen analysis classifier.

    Flags oligo-, astheno- and teratozoospermia independently, then folds
    the flags into a single composite label and an ICSI indication.

    Attributes:
        thresholds: Clinical threshold configuration
    """

    def __init__(self, thresholds: Optional[ClinicalThresholds] = None):
        self.thresholds = thresholds or get_config().clinical

    def classify(
        self,
        volume: Optional[float] = None,
        concentration: Optional[float] = None,
        total_count: Optional[float] = None,
        motility_pr: Optional[float] = None,
        morphology: Optional[float] = None,
    ) -> SemenClassification:
        """
        Classify a semen analysis.

        Args:
            volume: Ejaculate volume (mL)
            concentration: Sperm concentration (M/mL)
            total_count: Total sperm count; recorded but not used for the label
            motility_pr: Progressive motility (%), absent counts as 0
            morphology: Normal forms (%)

        Returns:
            SemenClassification with diagnosis, ICSI flag and findings
        """
        if not (is_present(volume) and is_present(concentration) and is_present(morphology)):
            return SemenClassification(
                diagnosis=SemenDiagnosis.INCOMPLETE,
                icsi_indicated=False,
                findings=(MISSING_PARAMETERS,),
            )

        t = self.thresholds
        motility = motility_pr if is_present(motility_pr) else 0.0

        oligo = concentration < t.semen_concentration_min
        astheno = motility < t.semen_motility_min
        terato = morphology < t.semen_morphology_min

        findings = []
        if oligo:
            findings.append(SemenDiagnosis.OLIGOZOOSPERMIA.value)
        if astheno:
            findings.append(SemenDiagnosis.ASTHENOZOOSPERMIA.value)
        if terato:
            findings.append(SemenDiagnosis.TERATOZOOSPERMIA.value)

        flag_count = len(findings)
        icsi_indicated = False

        if flag_count == 0:
            diagnosis = SemenDiagnosis.NORMAL
            # Low volume is reported but does not change the label
            if volume < t.semen_volume_min:
                findings.append(LOW_VOLUME)
        elif flag_count == 1:
            diagnosis = SemenDiagnosis(findings[0])
        elif flag_count == 2:
            diagnosis = _PAIR_DIAGNOSES[(oligo, astheno, terato)]
            icsi_indicated = oligo and astheno
        else:
            diagnosis = SemenDiagnosis.OAT
            icsi_indicated = True

        if concentration < t.severe_oligozoospermia_cutoff:
            icsi_indicated = True

        return SemenClassification(
            diagnosis=diagnosis,
            icsi_indicated=icsi_indicated,
            findings=tuple(findings),
        )

    def classify_observation(self, observation: SemenObservation) -> SemenClassification:
        """Classify a :class:`SemenObservation` record."""
        return self.classify(
            volume=observation.volume,
            concentration=observation.concentration,
            total_count=observation.total_count,
            motility_pr=observation.motility_progressive,
            morphology=observation.morphology,
        )

    def calculate_tmsc(
        self,
        volume: Optional[float] = None,
        concentration: Optional[float] = None,
        motility_pr: Optional[float] = None,
    ) -> TMSCResult:
        """Total motile sperm count = volume x concentration x PR%."""
        if not (is_present(volume) and is_present(concentration) and is_present(motility_pr)):
            return TMSCResult(tmsc=0.0, interpretation=TMSCInterpretation.CANNOT_CALCULATE)

        tmsc = volume * concentration * motility_pr / 100
        if tmsc >= self.thresholds.tmsc_adequate_min:
            interpretation = TMSCInterpretation.ADEQUATE
        else:
            interpretation = TMSCInterpretation.ICSI_MAY_BE_INDICATED
        return TMSCResult(tmsc=tmsc, interpretation=interpretation)


def classify_semen_analysis(
    volume: Optional[float] = None,
    concentration: Optional[float] = None,
    total_count: Optional[float] = None,
    motility_pr: Optional[float] = None,
    morphology: Optional[float] = None,
    thresholds: Optional[ClinicalThresholds] = None,
) -> SemenClassification:
    """Classify a semen analysis with the given (or configured) thresholds."""
    return SemenAnalysisClassifier(thresholds).classify(
        volume, concentration, total_count, motility_pr, morphology,
    )


def calculate_tmsc(
    volume: Optional[float] = None,
    concentration: Optional[float] = None,
    motility_pr: Optional[float] = None,
    thresholds: Optional[ClinicalThresholds] = None,
) -> TMSCResult:
    """Calculate the total motile sperm count."""
    return SemenAnalysisClassifier(thresholds).calculate_tmsc(volume, concentration, motility_pr)

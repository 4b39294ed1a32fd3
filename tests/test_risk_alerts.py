"""Tests for the risk alert generator."""

import pytest

from fertiscope.agents.pcos import calculate_pcos_criteria
from fertiscope.agents.risk_alerts import RiskAlertGenerator, generate_risk_alerts
from fertiscope.agents.semen import classify_semen_analysis
from fertiscope.config import AlertSeverity, AlertType, ClinicalThresholds


@pytest.fixture
def no_pcos():
    return calculate_pcos_criteria(False, False, False, False)


@pytest.fixture
def pcos():
    return calculate_pcos_criteria(True, True, False, True)


@pytest.fixture
def normal_semen():
    return classify_semen_analysis(3.0, 40.0, None, 55.0, 6.0)


class TestRiskAlerts:

    def test_no_alerts(self, no_pcos, normal_semen):
        assert generate_risk_alerts(30, 22.0, 1, no_pcos, normal_semen, False, False) == ()

    def test_all_conditions_in_order(self, pcos):
        oat = classify_semen_analysis(2.0, 10.0, None, 30.0, 2.0)
        alerts = generate_risk_alerts(42, 32.0, 4, pcos, oat, True, True)
        assert [a.type for a in alerts] == [
            AlertType.AGE,
            AlertType.BMI,
            AlertType.DURATION,
            AlertType.PCOS,
            AlertType.MALE_FACTOR,
            AlertType.TUBAL,
            AlertType.ENDOMETRIOSIS,
        ]
        assert [a.severity for a in alerts] == [
            AlertSeverity.WARNING,
            AlertSeverity.WARNING,
            AlertSeverity.WARNING,
            AlertSeverity.WARNING,
            AlertSeverity.CRITICAL,
            AlertSeverity.WARNING,
            AlertSeverity.INFO,
        ]

    def test_age_message(self, no_pcos, normal_semen):
        (alert,) = generate_risk_alerts(41, 22.0, 1, no_pcos, normal_semen, False, False)
        assert alert.message == "Advanced maternal age (41 years) - Consider expedited evaluation"
        assert alert.action == "Recommend timely treatment planning"

    def test_age_forty_no_alert(self, no_pcos, normal_semen):
        assert generate_risk_alerts(40, 22.0, 1, no_pcos, normal_semen, False, False) == ()

    def test_low_bmi_is_info(self, no_pcos, normal_semen):
        (alert,) = generate_risk_alerts(30, 17.2, 1, no_pcos, normal_semen, False, False)
        assert alert.type == AlertType.BMI
        assert alert.severity == AlertSeverity.INFO
        assert alert.message == "Low BMI (17.2) - Ensure adequate nutrition"

    def test_bmi_sentinel_skipped(self, no_pcos, normal_semen):
        assert generate_risk_alerts(30, 0, 1, no_pcos, normal_semen, False, False) == ()
        assert generate_risk_alerts(None, None, None, no_pcos, normal_semen, False, False) == ()

    def test_pcos_message(self, pcos, normal_semen):
        (alert,) = generate_risk_alerts(30, 22.0, 1, pcos, normal_semen, False, False)
        assert alert.message.startswith("PCOS diagnosis (3/3 Rotterdam criteria met)")

    def test_male_factor_without_icsi_is_warning(self, no_pcos):
        oligo = classify_semen_analysis(3.0, 10.0, None, 50.0, 5.0)
        (alert,) = generate_risk_alerts(30, 22.0, 1, no_pcos, oligo, False, False)
        assert alert.severity == AlertSeverity.WARNING
        assert alert.message == "Abnormal semen analysis: Oligozoospermia"
        assert alert.action == "Urological referral recommended"

    def test_male_factor_icsi_is_critical(self, no_pcos):
        severe = classify_semen_analysis(3.0, 3.0, None, 50.0, 5.0)
        (alert,) = generate_risk_alerts(30, 22.0, 1, no_pcos, severe, False, False)
        assert alert.severity == AlertSeverity.CRITICAL
        assert alert.action == "ICSI strongly indicated"

    def test_incomplete_semen_no_alert(self, no_pcos):
        incomplete = classify_semen_analysis(None, 10.0, None, 50.0, 5.0)
        assert generate_risk_alerts(30, 22.0, 1, no_pcos, incomplete, False, False) == ()

    def test_threshold_override(self, no_pcos, normal_semen):
        generator = RiskAlertGenerator(ClinicalThresholds(alert_age=38.0))
        alerts = generator.generate(39, 22.0, 1, no_pcos, normal_semen, False, False)
        assert [a.type for a in alerts] == [AlertType.AGE]

    def test_idempotent(self, pcos, normal_semen):
        first = generate_risk_alerts(42, 32.0, 4, pcos, normal_semen, True, True)
        assert first == generate_risk_alerts(42, 32.0, 4, pcos, normal_semen, True, True)

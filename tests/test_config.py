from __future__ import annotations

import pytest

from config import Config, ConfigurationError, build_config


def test_defaults_match_built_in_scenario():
    config = build_config()
    assert config.target_amount == 100_000_000
    assert config.annual_rate == 0.05
    assert config.current_monthly_contribution == 50_000
    assert config.horizons_years == [10, 15, 20, 25, 30]
    assert config.trajectory_years == 30
    assert config.milestone_interval_years == 5


def test_scenario_alias_and_field_name_both_accepted():
    assert build_config(scenario="Alias").Nickname == "Alias"
    assert build_config(Nickname="ByName").Nickname == "ByName"


@pytest.mark.parametrize(
    "overrides",
    [
        {"annual_rate": 0.0},
        {"annual_rate": -0.02},
        {"target_amount": 0},
        {"current_monthly_contribution": -1},
        {"horizons_years": []},
        {"horizons_years": [10, 0]},
        {"trajectory_years": 0},
        {"milestone_interval_years": 0},
    ],
)
def test_invalid_overrides_raise_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        build_config(**overrides)


def test_assignment_is_validated():
    config = Config()
    with pytest.raises(ValueError):
        config.annual_rate = 0.0


def test_high_rate_is_accepted():
    assert build_config(annual_rate=0.2).annual_rate == 0.2

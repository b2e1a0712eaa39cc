from __future__ import annotations

from math import isclose

from config import build_config
from simulation import TargetWealthProjector, calculate_required_monthly_contribution, simulate_wealth


def make_projector(**overrides) -> TargetWealthProjector:
    return TargetWealthProjector(build_config(**overrides))


def test_required_table_rows_follow_horizons():
    df = make_projector().required_contribution_table()
    assert df["Years"].tolist() == [10, 15, 20, 25, 30]
    assert df["Months"].tolist() == [120, 180, 240, 300, 360]

    for row in df.to_dict("records"):
        required = calculate_required_monthly_contribution(100_000_000, 0.05, row["Years"])
        assert isclose(row["Required Monthly"], required, rel_tol=1e-12)
        assert isclose(row["Total Invested"], required * row["Months"], rel_tol=1e-12)
        assert isclose(row["Profit"], 100_000_000 - row["Total Invested"], rel_tol=1e-9)
        assert isclose(row["Profit Rate"], row["Profit"] / row["Total Invested"] * 100, rel_tol=1e-9)


def test_default_scenario_has_no_achievable_horizon():
    projector = make_projector()
    assert not projector.required_contribution_table()["Achievable"].any()
    assert projector.first_achievable_horizon() is None


def test_first_achievable_horizon_with_larger_contribution():
    # 30 yrs needs about 120,155/mo and 25 yrs about 167,900/mo.
    projector = make_projector(current_monthly_contribution=150_000)
    assert projector.first_achievable_horizon() == 30


def test_current_table_uses_simulated_final_balance():
    df = make_projector().current_contribution_table()
    for row in df.to_dict("records"):
        final = simulate_wealth(50_000, 0.05, row["Years"])[-1]
        assert isclose(row["Final Balance"], final, rel_tol=1e-12)
        assert isclose(row["Total Invested"], 50_000 * row["Months"], rel_tol=1e-12)
        assert row["Profit"] > 0


def test_current_table_zero_contribution_has_zero_profit_rate():
    df = make_projector(current_monthly_contribution=0).current_contribution_table()
    assert (df["Profit Rate"] == 0.0).all()


def test_trajectory_default_shows_milestones_and_final_year():
    df = make_projector().trajectory_table()
    assert df["Year"].tolist() == [5, 10, 15, 20, 25, 30]
    assert not df["Target Reached"].any()


def test_trajectory_full_table_has_every_year():
    df = make_projector().trajectory_table(milestones_only=False)
    assert df["Year"].tolist() == list(range(1, 31))
    assert isclose(df["Total Invested"].iloc[-1], 50_000 * 360, rel_tol=1e-12)


def test_trajectory_keeps_every_year_at_or_above_target():
    projector = make_projector(current_monthly_contribution=200_000)
    full = projector.trajectory_table(milestones_only=False)
    expected = [
        year
        for year, balance in zip(full["Year"], full["Balance"])
        if year % 5 == 0 or balance >= 100_000_000 or year == 30
    ]

    df = projector.trajectory_table()
    assert df["Year"].tolist() == expected
    reached = df.loc[df["Target Reached"], "Year"].tolist()
    assert reached[0] == 23
    assert reached == list(range(23, 31))


def test_trajectory_final_year_kept_off_milestone():
    df = make_projector(trajectory_years=12).trajectory_table()
    assert df["Year"].tolist() == [5, 10, 12]


def test_outlook_reports_shortfall_and_additional_contribution():
    outlook = make_projector().outlook()
    final = simulate_wealth(50_000, 0.05, 30)[-1]
    required = calculate_required_monthly_contribution(100_000_000, 0.05, 30)

    assert not outlook.target_met
    assert isclose(outlook.final_balance, final, rel_tol=1e-12)
    assert isclose(outlook.shortfall, 100_000_000 - final, rel_tol=1e-12)
    assert isclose(outlook.additional_monthly_needed, required - 50_000, rel_tol=1e-12)


def test_outlook_when_target_met():
    outlook = make_projector(current_monthly_contribution=200_000).outlook()
    assert outlook.target_met
    assert outlook.shortfall == 0.0
    assert outlook.additional_monthly_needed == 0.0


def test_projector_keeps_its_own_copy_of_config():
    config = build_config()
    projector = TargetWealthProjector(config)
    config.current_monthly_contribution = 999_999
    assert projector.params_model.current_monthly_contribution == 50_000

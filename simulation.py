import numpy as np
import pandas as pd
from typing import List, Optional
from loguru import logger
from pydantic import BaseModel

from config import Config, ConfigurationError
from constants import MONTHS_PER_YEAR, SMALL_EPSILON


def _validate_projection_inputs(amount: float, annual_rate: float, years: int, amount_label: str) -> None:
    if years <= 0:
        raise ConfigurationError(f"Horizon must be a positive number of years, got {years}.")
    # A zero rate would divide by zero in the annuity factor; it is rejected rather than special-cased.
    if annual_rate <= 0:
        raise ConfigurationError(f"Annual rate must be positive, got {annual_rate}.")
    if amount < 0:
        raise ConfigurationError(f"{amount_label} must not be negative, got {amount}.")


def calculate_required_monthly_contribution(target: float, annual_rate: float, years: int) -> float:
    """
    Solves the future value of an annuity for the payment.

    FV = PMT * [(1 + r)^n - 1] / r, so PMT = FV / ([(1 + r)^n - 1] / r), with r the
    monthly rate and n the number of months.

    This is the ordinary-annuity payment (spreadsheet PMT). simulate_wealth contributes
    before accruing, so each payment earns one extra month of interest there: feeding
    this payment into simulate_wealth ends at target * (1 + r), slightly above target.
    """
    _validate_projection_inputs(target, annual_rate, years, "Target amount")
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    months = years * MONTHS_PER_YEAR
    denominator = ((1 + monthly_rate) ** months - 1) / monthly_rate
    return target / denominator


def simulate_wealth(monthly_contribution: float, annual_rate: float, years: int) -> List[float]:
    """
    Accumulates a fixed monthly contribution at a fixed annual rate.

    Each month the contribution is added first and then a month of interest accrues.

    Returns:
        Year-end balances, one per simulated year (index 0 is the end of year 1).
    """
    _validate_projection_inputs(monthly_contribution, annual_rate, years, "Monthly contribution")
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    wealth = 0.0
    yearly_wealth: List[float] = []

    for month in range(1, years * MONTHS_PER_YEAR + 1):
        wealth += monthly_contribution
        wealth *= 1 + monthly_rate
        if month % MONTHS_PER_YEAR == 0:
            yearly_wealth.append(wealth)

    logger.debug(
        f"Simulated {years} yrs at {monthly_contribution:,.0f}/mo and {annual_rate * 100:.2f}%: final {wealth:,.0f}"
    )
    return yearly_wealth


class ProjectionOutlook(BaseModel):
    trajectory_years: int
    final_balance: float
    target_amount: float
    target_met: bool
    shortfall: float
    required_monthly: float
    additional_monthly_needed: float


def _profit_rate(profit: pd.Series, invested: pd.Series) -> pd.Series:
    return (profit / invested * 100.0).where(invested > SMALL_EPSILON, 0.0)


class TargetWealthProjector:
    """
    Projects how a monthly investment plan compares to a target net worth.

    Builds the tables shown in the report: the contribution required per horizon,
    what the current contribution reaches per horizon, and the year-by-year trajectory.
    """

    def __init__(self, params_model: Config):
        self.params_model = params_model.model_copy(deep=True)
        logger.info(
            f"Projector initialized for scenario '{self.params_model.Nickname}' "
            f"over horizons {self.params_model.horizons_years}"
        )

    def required_contribution_table(self) -> pd.DataFrame:
        """Monthly contribution needed to hit the target for each configured horizon."""
        p = self.params_model
        rows = []
        for years in p.horizons_years:
            months = years * MONTHS_PER_YEAR
            required = calculate_required_monthly_contribution(p.target_amount, p.annual_rate, years)
            rows.append(
                {
                    "Years": years,
                    "Months": months,
                    "Required Monthly": required,
                    "Total Invested": required * months,
                }
            )

        df = pd.DataFrame(rows)
        df["Profit"] = p.target_amount - df["Total Invested"]
        df["Profit Rate"] = _profit_rate(df["Profit"], df["Total Invested"])
        df["Achievable"] = df["Required Monthly"] <= p.current_monthly_contribution
        logger.debug(f"Required contribution table built with {len(df)} horizons.")
        return df

    def current_contribution_table(self) -> pd.DataFrame:
        """Final balance reached with the current contribution for each configured horizon."""
        p = self.params_model
        rows = []
        for years in p.horizons_years:
            months = years * MONTHS_PER_YEAR
            yearly_wealth = simulate_wealth(p.current_monthly_contribution, p.annual_rate, years)
            rows.append(
                {
                    "Years": years,
                    "Months": months,
                    "Final Balance": yearly_wealth[-1],
                    "Total Invested": p.current_monthly_contribution * months,
                }
            )

        df = pd.DataFrame(rows)
        df["Profit"] = df["Final Balance"] - df["Total Invested"]
        df["Profit Rate"] = _profit_rate(df["Profit"], df["Total Invested"])
        return df

    def trajectory_table(self, milestones_only: bool = True) -> pd.DataFrame:
        """
        Year-end balances for the trajectory horizon at the current contribution.

        With milestones_only, keeps every milestone-interval year, every year at or above
        the target, and the final year.
        """
        p = self.params_model
        wealth = np.array(simulate_wealth(p.current_monthly_contribution, p.annual_rate, p.trajectory_years))
        years = np.arange(1, p.trajectory_years + 1)
        invested = p.current_monthly_contribution * years * MONTHS_PER_YEAR

        df = pd.DataFrame(
            {
                "Year": years,
                "Balance": wealth,
                "Total Invested": invested,
                "Profit": wealth - invested,
                "Target Reached": wealth >= p.target_amount,
            }
        )
        if not milestones_only:
            return df

        keep = (
            (df["Year"] % p.milestone_interval_years == 0)
            | df["Target Reached"]
            | (df["Year"] == p.trajectory_years)
        )
        return df[keep].reset_index(drop=True)

    def first_achievable_horizon(self) -> Optional[int]:
        """Shortest configured horizon the current contribution already covers, if any."""
        df = self.required_contribution_table()
        achievable_years = df.loc[df["Achievable"], "Years"]
        if achievable_years.empty:
            return None
        return int(achievable_years.min())

    def outlook(self) -> ProjectionOutlook:
        """Whether the current contribution reaches the target by the end of the trajectory horizon."""
        p = self.params_model
        final_balance = simulate_wealth(p.current_monthly_contribution, p.annual_rate, p.trajectory_years)[-1]
        required = calculate_required_monthly_contribution(p.target_amount, p.annual_rate, p.trajectory_years)
        target_met = final_balance >= p.target_amount

        return ProjectionOutlook(
            trajectory_years=p.trajectory_years,
            final_balance=final_balance,
            target_amount=p.target_amount,
            target_met=target_met,
            shortfall=0.0 if target_met else p.target_amount - final_balance,
            required_monthly=required,
            additional_monthly_needed=0.0 if target_met else required - p.current_monthly_contribution,
        )

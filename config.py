from typing import Any, List
from pydantic import BaseModel, Field, ValidationError, field_validator, ValidationInfo
from loguru import logger

from constants import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_HORIZONS_YEARS,
    DEFAULT_MILESTONE_INTERVAL_YEARS,
    DEFAULT_MONTHLY_CONTRIBUTION,
    DEFAULT_SCENARIO_NAME,
    DEFAULT_TARGET_AMOUNT,
    DEFAULT_TRAJECTORY_YEARS,
    HIGH_ANNUAL_RATE_WARNING,
)


class ConfigurationError(Exception):
    """Raised when scenario parameters are invalid or cannot be projected."""


class Config(BaseModel):
    """Scenario parameters for the target wealth projection."""

    Nickname: str = Field(
        DEFAULT_SCENARIO_NAME,
        alias="scenario",
        description="A nickname for this projection scenario.",
    )
    target_amount: float = Field(
        DEFAULT_TARGET_AMOUNT, gt=0, description="Net worth to reach, in yen."
    )
    annual_rate: float = Field(
        DEFAULT_ANNUAL_RATE,
        gt=0,
        description="Fixed annual return as a fraction (0.05 = 5%). Zero is rejected.",
    )
    current_monthly_contribution: float = Field(
        DEFAULT_MONTHLY_CONTRIBUTION,
        ge=0,
        description="What is being invested every month today, in yen.",
    )
    horizons_years: List[int] = Field(
        default_factory=lambda: list(DEFAULT_HORIZONS_YEARS),
        min_length=1,
        description="Horizons compared in the contribution tables.",
    )
    trajectory_years: int = Field(DEFAULT_TRAJECTORY_YEARS, gt=0)
    milestone_interval_years: int = Field(DEFAULT_MILESTONE_INTERVAL_YEARS, gt=0)

    model_config = {"validate_by_name": True, "validate_assignment": True}

    @field_validator("horizons_years")
    @classmethod
    def check_horizons_positive(cls, v: List[int]) -> List[int]:
        bad = [years for years in v if years <= 0]
        if bad:
            raise ValueError(f"Horizons must be positive year counts, got {bad}")
        return v

    @field_validator("annual_rate")
    @classmethod
    def check_annual_rate(cls, v: float, info: ValidationInfo) -> float:
        if v > HIGH_ANNUAL_RATE_WARNING:
            scen_name = info.data.get("Nickname", "N/A")
            logger.warning(
                f"Annual rate ({v * 100:.1f}%) is optimistic for an index fund in scenario '{scen_name}'."
            )
        return v


def build_config(**overrides: Any) -> Config:
    """Builds a validated Config from the defaults plus any keyword overrides."""
    try:
        return Config(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid projection configuration: {e}") from e

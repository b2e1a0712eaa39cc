# constants.py

MONTHS_PER_YEAR: int = 12
SMALL_EPSILON: float = 1e-6

# Default scenario
DEFAULT_SCENARIO_NAME: str = "OneOkuTarget"
DEFAULT_TARGET_AMOUNT: float = 100_000_000.0
DEFAULT_ANNUAL_RATE: float = 0.05
DEFAULT_MONTHLY_CONTRIBUTION: float = 50_000.0
DEFAULT_HORIZONS_YEARS: tuple = (10, 15, 20, 25, 30)
DEFAULT_TRAJECTORY_YEARS: int = 30
DEFAULT_MILESTONE_INTERVAL_YEARS: int = 5
HIGH_ANNUAL_RATE_WARNING: float = 0.10

# Base-10,000 magnitude bands
MAN: float = 10_000.0
OKU: float = 100_000_000.0

# Report layout
BANNER_WIDTH: int = 62
SECTION_RULE: str = "━" * 50

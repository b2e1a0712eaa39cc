import sys
from typing import Optional
from loguru import logger

from config import Config
from simulation import ProjectionOutlook


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            level=level,
            rotation="10 MB",
        )


def log_input_parameters(config: Config) -> None:
    """Logs the input parameters for the projection."""
    logger.info(f"--- Input Parameters For Scenario: {config.Nickname} ---")
    for key, value in config.model_dump(by_alias=False).items():
        if key == "Nickname":
            continue
        label = key.replace("_", " ").title()
        if key == "annual_rate":
            logger.info(f"{label}: {value * 100:.2f}%")
        elif key in ("target_amount", "current_monthly_contribution"):
            logger.info(f"{label}: ¥{value:,.0f}")
        elif key == "horizons_years":
            logger.info(f"{label}: {', '.join(str(y) for y in value)}")
        else:
            logger.info(f"{label}: {value}")
    logger.info("--- End of Input Parameters ---")


def log_projection_results(
    config: Config, outlook: ProjectionOutlook, first_achievable: Optional[int]
) -> None:
    """Logs the headline results of the projection."""
    logger.info(f"--- Projection Results for Scenario: '{config.Nickname}' ---")
    if first_achievable is None:
        logger.info(
            f"No configured horizon is reachable with ¥{config.current_monthly_contribution:,.0f}/mo."
        )
    else:
        logger.info(f"Shortest reachable horizon at the current contribution: {first_achievable} yrs")
    logger.info(
        f"Balance after {outlook.trajectory_years} yrs: ¥{outlook.final_balance:,.0f} "
        f"(Target: ¥{outlook.target_amount:,.0f}, met: {outlook.target_met})"
    )
    if not outlook.target_met:
        logger.info(
            f"Shortfall ¥{outlook.shortfall:,.0f}; additional ¥{outlook.additional_monthly_needed:,.0f}/mo needed."
        )

# target_wealth - Target Net Worth Projector
# Description: Compound-interest projections for reaching a target net worth with fixed monthly index-fund contributions.

from loguru import logger

from config import ConfigurationError, build_config
from report import print_report
from simulation import TargetWealthProjector
from utils import configure_logging, log_input_parameters, log_projection_results


def main() -> int:
    """
    Main execution entry point.

    Builds the scenario configuration from the built-in constants, logs it, prints the
    projection report to stdout and logs the headline results.
    """
    configure_logging()

    try:
        config = build_config()
        logger.info(f"Configuration for scenario '{config.Nickname}' validated successfully.")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    log_input_parameters(config)

    projector = TargetWealthProjector(config)
    print_report(projector)

    log_projection_results(config, projector.outlook(), projector.first_achievable_horizon())
    logger.info(f"--- Main execution finished for scenario '{config.Nickname}'. ---")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

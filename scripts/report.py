"""
Weekly billable-hours report entry point.
Run this file to print the hours accounted for this business week.
On first run a browser window opens for Google consent.
"""

import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from googleapiclient.errors import HttpError

from billable_hours.core.orchestrator import OrchestratorFactory
from billable_hours.core.config_manager import Config
from billable_hours.core.report_window import resolve_window
from billable_hours.models import MalformedEventError
from billable_hours.utils.logger import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()

    try:
        config = Config.report_config()
        time_min, time_max = resolve_window(
            Config.report_start_date(),
            Config.REPORT_DAYS,
            config.timezone,
        )
        logger.info(f"Report window: {time_min.isoformat()} -> {time_max.isoformat()}")

        orchestrator = OrchestratorFactory.create(config)
        orchestrator.run_report(time_min, time_max)
        return 0

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename or e}")
        return 1

    except ConnectionError as e:
        logger.error("Authentication failed", exc_info=True)
        logger.error(str(e))
        return 1

    except HttpError as e:
        logger.error("Calendar API request failed", exc_info=True)
        logger.error(str(e))
        return 1

    except MalformedEventError as e:
        logger.error(f"Malformed event {e.event_id}: {e}", exc_info=True)
        logger.error("Set BILLABLE_HOURS_SKIP_MALFORMED=true to leave such events out")
        return 1

    except KeyboardInterrupt:
        logger.warning("Report interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())

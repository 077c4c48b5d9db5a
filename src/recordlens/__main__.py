"""Demo entry point: seed sample data, analyze it and log the result.

Run with:
    python -m recordlens
"""

import logging
import sys

from recordlens.adapters.logging import configure_logging
from recordlens.core.errors import ProcessingError
from recordlens.system import ProcessingSystem

logger = logging.getLogger("recordlens.main")


def main() -> int:
    system = ProcessingSystem()
    configure_logging(system.config)
    logger.info("Starting recordlens...")
    try:
        system.initialize().result()
        result = system.process_data().result()
    except ProcessingError:
        logger.error("Error during system execution", exc_info=True)
        return 1
    finally:
        system.shutdown()

    logger.info("Analysis completed in %.3fms", result.processing_time_ms)
    logger.info("Summary: %s", dict(result.summary))
    logger.info("Insights: %s", list(result.insights))
    logger.info("Recommendations: %s", list(result.recommendations))
    return 0


if __name__ == "__main__":
    sys.exit(main())

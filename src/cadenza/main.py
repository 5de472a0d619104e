"""
Cadenza - Music Library Manager
Main entry point for the application.
"""

import logging
import sys
from typing import List, Optional

from .core import setup_logging
from .core.exceptions import ConfigurationError
from .ui.cli import CadenzaCLI

logger = logging.getLogger(__name__)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    setup_logging()
    logger.debug("Starting Cadenza Music Library")
    try:
        cli = CadenzaCLI()
        return cli.run(args)
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 2
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    sys.exit(main())

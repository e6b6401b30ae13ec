"""Debug logging switch.

Setting JVMSWITCH_DEBUG turns on DEBUG-level logging on stderr. stdout is
never used so the shell hook can still capture the selected path.
"""

import logging
import os
import sys

DEBUG_ENV_VAR = "JVMSWITCH_DEBUG"
DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging() -> None:
    """Enable debug logging if JVMSWITCH_DEBUG environment variable is set."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT, stream=sys.stderr)

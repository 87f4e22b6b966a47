"""Debug logging switch shared by the rvm and resolc entry points."""

import logging
import os

DEBUG_ENV_VAR = "RVM_DEBUG"
_DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Enable debug logging when requested by flag or the RVM_DEBUG variable."""
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format=_DEBUG_FORMAT)

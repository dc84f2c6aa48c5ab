# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger. Configure handlers with `easyargs.utils.setup_logging`."""
import logging

logger = logging.getLogger("easyargs")

# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Dialex."""
import logging

logger: logging.Logger = logging.getLogger("dialex")

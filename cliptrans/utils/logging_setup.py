"""
Logging setup for ClipTrans.
"""
import os
import sys
import logging
import traceback
from datetime import datetime
from typing import Optional

from cliptrans.constants import VERSION, LOG_DIR_NAME
from cliptrans.utils.paths import get_config_dir


def setup_logging(config_dir: Optional[str] = None, level: int = logging.INFO) -> Optional[str]:
    """Setup logging to file and console for crash debugging.

    Returns:
        The log file path, or None when only console logging is possible.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = None

    base_dir = config_dir or get_config_dir()
    if base_dir:
        log_dir = os.path.join(base_dir, LOG_DIR_NAME)
        try:
            os.makedirs(log_dir, exist_ok=True)
            log_file = os.path.join(log_dir, f'translator_{datetime.now().strftime("%Y%m%d")}.log')
            handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            print(f"Could not create log directory {log_dir}: {e}", file=sys.stderr)
            log_file = None

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=handlers,
        force=True,
    )

    def exception_handler(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logging.critical("Uncaught exception:", exc_info=(exc_type, exc_value, exc_tb))
        logging.critical("".join(traceback.format_exception(exc_type, exc_value, exc_tb)))

    sys.excepthook = exception_handler
    logging.info(f"ClipTrans v{VERSION} started")
    if log_file:
        logging.info(f"Log file: {log_file}")

    return log_file

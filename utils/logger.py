import logging
import os
from datetime import datetime

from config import LOG_DIR

def setup_logger(name="regex_scanner", log_dir=LOG_DIR, verbose=False):
    """
    Configures the root logger with a console handler and, unless log_dir is
    empty, a timestamped log file. Returns the named logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # setup_logger may run more than once per process (tests, repeated CLI calls)
    if logger.handlers:
        logger.handlers = []

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"scan_{timestamp}.log")

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    # Console goes to stderr, stdout is kept for results
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logging.getLogger(name)

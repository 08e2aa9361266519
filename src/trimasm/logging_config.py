import logging
import sys
from pathlib import Path

# Formatting
FORMAT = "%(levelname)s\t[%(asctime)s]\t[%(filename)s:%(lineno)d]\t%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
formatter = logging.Formatter(FORMAT, DATE_FORMAT)

# Configure logger
logger = logging.getLogger("trimasm")
logger.setLevel(logging.INFO)

# Warnings and errors go to the diagnostic stream
stream_handler = logging.StreamHandler(sys.stderr)
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)


# Function to set file handler
def set_log_file_handler(ll: logging.Logger, log_file: Path) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    ll.addHandler(file_handler)

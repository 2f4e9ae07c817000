import logging
import logging.handlers
import re
from pathlib import Path
from typing import Optional

class SensitiveDataFilter(logging.Filter):
    """
    Filter to mask credentials in log records.
    """
    def __init__(self, name=""):
        super().__init__(name)
        self.patterns = [
            (r'(://[^:/@\s]+:)([^@\s]+)(@)', r'\1***MASKED***\3'),  # user:password@host in URLs
            (r'(password=)[\'"]?([^\'"\s]+)[\'"]?', r'\1***MASKED***'),
        ]

    def filter(self, record):
        if not isinstance(record.msg, str):
            return True

        msg = record.msg
        for pattern, replacement in self.patterns:
            msg = re.sub(pattern, replacement, msg, flags=re.IGNORECASE)

        record.msg = msg
        return True

def mask_url(url: str) -> str:
    """Return the URL with any password replaced by ***MASKED***."""
    return re.sub(r'(://[^:/@\s]+:)([^@\s]+)(@)', r'\1***MASKED***\3', url)

def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> Optional[Path]:
    """
    Configures logging for the fault demo.
    Writes to stderr, and to a rotating file when log_file is given,
    so that stdout carries only scenario output.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    sensitive_filter = SensitiveDataFilter()

    # Console Handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(sensitive_filter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Remove existing handlers to avoid duplicates if called multiple times
    root_logger.handlers = []
    root_logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Rotates when file size reaches 10MB, keeps 5 backup files
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(sensitive_filter)
        root_logger.addHandler(file_handler)

    # The async database driver is chatty at debug level
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return log_path

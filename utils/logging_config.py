"""
Centralized Logging Configuration

Provides logging for the TechMart backend with:
- Configurable log levels
- Automatic log rotation
- Secret masking to prevent credential leaks
- Silenced SQL loggers unless SQL_ECHO is enabled
"""

import logging
import logging.handlers
import re
from pathlib import Path
from typing import Pattern

import config

SQL_LOGGERS = ['aiosqlite', 'sqlalchemy', 'sqlalchemy.engine', 'sqlalchemy.pool', 'sqlalchemy.orm']


class SecretMaskingFilter(logging.Filter):
    """
    Logging filter that masks sensitive data in log records.

    Prevents credential leaks by replacing sensitive values with [REDACTED].

    Masks:
    - API keys and secrets
    - Tokens and passwords given as key=value
    - Bearer tokens
    - bcrypt password hashes
    """

    # Patterns for secret masking
    PATTERNS: list[tuple[Pattern, str]] = [
        # API Keys (various formats)
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-]{20,})(["\']?)', re.IGNORECASE), r'\1[REDACTED_API_KEY]\3'),
        (re.compile(r'(api[_-]?secret["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-]{20,})(["\']?)', re.IGNORECASE), r'\1[REDACTED_API_SECRET]\3'),

        # Tokens
        (re.compile(r'(token["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-:]{20,})(["\']?)', re.IGNORECASE), r'\1[REDACTED_TOKEN]\3'),
        (re.compile(r'(Bearer\s+)([A-Za-z0-9_\-\.]+)', re.IGNORECASE), r'\1[REDACTED_BEARER_TOKEN]'),

        # bcrypt hashes ($2a$, $2b$, $2y$ + cost + 53 chars salt/digest)
        (re.compile(r'\$2[aby]?\$\d{2}\$[./A-Za-z0-9]{53}'), '[REDACTED_PASSWORD_HASH]'),

        # Passwords
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)([^\s"\']+)(["\']?)', re.IGNORECASE), r'\1[REDACTED_PASSWORD]\3'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record to mask sensitive data.

        Args:
            record: LogRecord to filter

        Returns:
            True (always - we modify but don't block records)
        """
        # Mask secrets in the message
        if record.msg:
            for pattern, replacement in self.PATTERNS:
                record.msg = pattern.sub(replacement, str(record.msg))

        # Mask secrets in arguments
        if record.args:
            masked_args = []
            for arg in record.args:
                if isinstance(arg, str):
                    for pattern, replacement in self.PATTERNS:
                        arg = pattern.sub(replacement, arg)
                masked_args.append(arg)
            record.args = tuple(masked_args)

        return True


def silence_sql_loggers() -> None:
    """Keep SQLAlchemy/aiosqlite statement logging out of the application log."""
    for logger_name in SQL_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False


def _formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt='%(asctime)s | %(name)-25s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _console_handler(log_level: int, mask_secrets: bool) -> logging.Handler:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter())
    console_handler.setLevel(log_level)
    if mask_secrets:
        console_handler.addFilter(SecretMaskingFilter())
    return console_handler


def setup_console_logging():
    """
    Log to stderr only.

    Used for errors raised while resolving the configuration, before
    setup_logging() may create LOG_DIR and the log file.
    """
    root_logger = logging.getLogger()
    root_logger.addHandler(_console_handler(logging.INFO, getattr(config, "LOG_MASK_SECRETS", True)))


def setup_logging():
    """
    Initialize centralized logging configuration.

    Call this function once at application startup (in run.py).

    Configuration:
    - Log level from config.LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)
    - Automatic rotation every midnight
    - Keeps logs for config.LOG_RETENTION_DAYS days
    - Masks secrets if config.LOG_MASK_SECRETS is True
    - Writes to <config.LOG_DIR>/techmart.log and to stderr
    """
    # Create logs directory if it doesn't exist
    log_dir = Path(getattr(config, "LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Get log level from config (default to INFO)
    log_level_str = getattr(config, "LOG_LEVEL", "INFO")
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    retention_days = getattr(config, "LOG_RETENTION_DAYS", 7)

    # Check if secret masking is enabled (default to True for security)
    mask_secrets = getattr(config, "LOG_MASK_SECRETS", True)

    formatter = _formatter()

    # Create file handler with rotation
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_dir / "techmart.log",
        when="midnight",          # Rotate at midnight
        interval=1,               # Every 1 day
        backupCount=retention_days,  # Keep N days of logs
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    # Console handler for immediate feedback
    console_handler = _console_handler(log_level, mask_secrets)

    if mask_secrets:
        file_handler.addFilter(SecretMaskingFilter())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if not getattr(config, "SQL_ECHO", False):
        silence_sql_loggers()

    logging.info(f"Logging initialized: Level={log_level_str}, Retention={retention_days} days, "
                 f"Masking={'ENABLED' if mask_secrets else 'DISABLED'}")

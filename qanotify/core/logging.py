"""Logging setup for the notification run.

Recipient addresses are the only personal data the run logs.  When
redaction is on, the local part of every address is masked and the
domain kept, e.g. ``[REDACTED]@example.org``.
"""
import logging
import logging.config
import re
from collections.abc import Mapping

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
REDACTED = "[REDACTED]"


def mask_emails(text: str) -> str:
    return EMAIL_PATTERN.sub(lambda m: f"{REDACTED}@{m.group(1)}", text)


class EmailRedactingFilter(logging.Filter):
    """Mask e-mail addresses in the message and its string arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = mask_emails(record.msg)
        if isinstance(record.args, Mapping):
            record.args = {key: _redact_arg(value) for key, value in record.args.items()}
        elif record.args:
            record.args = tuple(_redact_arg(arg) for arg in record.args)
        return True


def _redact_arg(value: object) -> object:
    return mask_emails(value) if isinstance(value, str) else value


def setup_logging(level: str = "INFO", redact_emails: bool = True) -> None:
    handler: dict[str, object] = {
        "class": "logging.StreamHandler",
        "formatter": "default",
        "stream": "ext://sys.stderr",
    }
    if redact_emails:
        handler["filters"] = ["redact_emails"]

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_emails": {
                    "()": "qanotify.core.logging.EmailRedactingFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {"console": handler},
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": level.upper(),
                },
            },
        }
    )

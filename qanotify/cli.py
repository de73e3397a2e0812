"""Command line entry point.

Usage::

    qanotify REPORTS_DIR

``REPORTS_DIR`` holds one sub-directory per QA batch.  Resource files
(curator list, check descriptions) are read from ``RESOURCES_DIR``; mail
settings come from the environment or ``.env``.
"""
from __future__ import annotations

import argparse
import logging
import smtplib
import sys
from pathlib import Path

from qanotify.catalog.descriptions import CheckCatalog, load_check_catalog
from qanotify.core.errors import ConfigurationError, ReportsDirectoryError
from qanotify.core.logging import setup_logging
from qanotify.core.settings import Settings, get_settings
from qanotify.identity.table import IdentityTable, load_identity_table
from qanotify.notification.email_sender import EmailSender
from qanotify.pipeline.batch import run_batch

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> list[str]:
    """Return the positional tokens followed by any unrecognised options."""
    parser = argparse.ArgumentParser(
        prog="qanotify",
        description="Format QA reports as HTML and notify the responsible curators.",
    )
    parser.add_argument(
        "reports_dir",
        nargs="*",
        help="Reports root directory containing one sub-directory per batch.",
    )
    args, unknown = parser.parse_known_args(argv)
    return args.reports_dir + unknown


def load_resources(settings: Settings) -> tuple[IdentityTable, CheckCatalog]:
    """Load the curator list and check catalog named by *settings*.

    Raises
    ------
    ConfigurationError
        If either configured file cannot be loaded.
    """
    resources = Path(settings.resources_dir)
    identities = load_identity_table(resources / settings.curators_file)
    descriptions = resources / settings.descriptions_file if settings.descriptions_file else None
    catalog = load_check_catalog(descriptions)
    return identities, catalog


def main(argv: list[str] | None = None) -> int:
    tokens = parse_args(argv)
    if not tokens:
        print("Missing the reports directory command argument.", file=sys.stderr)
        return 1
    if len(tokens) > 1:
        print(f"Extraneous arguments: {', '.join(tokens[1:])}", file=sys.stderr)
        return 1
    reports_dir = Path(tokens[0])
    if not reports_dir.is_dir():
        print(f"Reports directory not found: {reports_dir}", file=sys.stderr)
        return 1

    try:
        settings = get_settings()
        setup_logging(settings.log_level, redact_emails=settings.redact_log_emails)
        identities, catalog = load_resources(settings)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    sender = EmailSender(
        smtp_host=settings.smtp_host,
        smtp_port=settings.smtp_port,
        sender=settings.mail_from,
        subject=settings.mail_subject,
    )

    try:
        result = run_batch(reports_dir, settings, identities, catalog, sender)
    except ReportsDirectoryError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("Notification run aborted: %s", exc)
        print(f"Notification run aborted: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Processed %d report(s); wrote %d document(s); %d summary entries; sent %d message(s).",
        result.reports,
        len(result.documents),
        len(result.summary_entries),
        len(result.receipts),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

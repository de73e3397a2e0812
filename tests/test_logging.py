import logging

from qanotify.core.logging import EmailRedactingFilter, mask_emails


def test_filter_redacts_email_in_message(caplog):
    logger = logging.getLogger("test.redact")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(EmailRedactingFilter())

    with caplog.at_level(logging.INFO, logger="test.redact"):
        logger.info("Contact john.doe@example.com about the report")

    assert "john.doe@example.com" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_filter_redacts_email_in_args(caplog):
    logger = logging.getLogger("test.redact.args")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(EmailRedactingFilter())

    with caplog.at_level(logging.INFO, logger="test.redact.args"):
        logger.info("Sent notification to %s (%d rows)", "jane@example.org", 3)

    assert "jane@example.org" not in caplog.text
    assert "Sent notification to [REDACTED]@example.org (3 rows)" in caplog.text


def test_filter_redacts_email_in_mapping_args(caplog):
    logger = logging.getLogger("test.redact.mapping")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(EmailRedactingFilter())

    with caplog.at_level(logging.INFO, logger="test.redact.mapping"):
        logger.info("Digest for %(to)s has %(count)d report(s)", {"to": "b.smith@example.org", "count": 2})

    assert "b.smith" not in caplog.text
    assert "Digest for [REDACTED]@example.org has 2 report(s)" in caplog.text


def test_mask_emails_keeps_domain_and_other_text():
    text = "to a.jones@example.org, cc j.obrien@ebi.ac.uk; host qa.example.org"
    assert mask_emails(text) == "to [REDACTED]@example.org, cc [REDACTED]@ebi.ac.uk; host qa.example.org"

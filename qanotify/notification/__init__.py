"""Notification package.

Renders per-recipient report documents, composes one digest message per
recipient from those documents, and delivers the digests by SMTP.
"""

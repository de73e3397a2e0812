"""qanotify: route QA report rows to curators and mail them HTML digests."""

__version__ = "0.1.0"

"""Curator identities: who receives which reports."""

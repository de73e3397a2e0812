"""Batch summary consolidation."""

"""Batch pipeline."""

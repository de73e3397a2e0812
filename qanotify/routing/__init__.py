"""Routing: decide which recipients see which report rows."""

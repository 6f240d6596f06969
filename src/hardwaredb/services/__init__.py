"""Scoring and ranking over the catalog."""

"""Balanced scorecard self-assessment."""

"""Settings and session wiring."""

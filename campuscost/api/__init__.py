"""HTTP API for the campuscost engine."""

"""HTTP API for Realty Scout."""

"""HTTP API for sector generation."""

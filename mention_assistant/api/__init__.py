"""HTTP API for the assistant."""

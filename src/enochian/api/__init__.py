"""HTTP API for the Enochian translator."""

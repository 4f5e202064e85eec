"""HTTP server wiring for the resolved configuration."""

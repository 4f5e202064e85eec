"""Code.gov API server runtime configuration."""

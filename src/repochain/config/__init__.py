"""Configuration: application settings and repository declarations."""

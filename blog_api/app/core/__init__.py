"""Configuration, logging and the shared API context."""

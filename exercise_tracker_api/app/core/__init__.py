"""Configuration, logging, error types and the store connection."""

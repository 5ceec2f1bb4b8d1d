"""Configuration, logging, error types and storage for the service."""

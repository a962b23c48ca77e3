"""Configuration, identifiers and error types shared across the package."""

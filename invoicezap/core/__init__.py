"""Core domain: models, services, strategies."""

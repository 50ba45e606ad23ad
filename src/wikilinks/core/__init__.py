"""Core domain: errors, models and ports."""

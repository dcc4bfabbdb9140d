"""Output helpers for decoded documents."""

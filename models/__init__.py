"""Receipt and item models."""

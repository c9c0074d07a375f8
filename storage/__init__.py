"""Receipt points storage implementations."""

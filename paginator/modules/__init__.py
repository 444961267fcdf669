"""Feature modules for paginator."""

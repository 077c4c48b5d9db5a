"""Web framework adapters."""

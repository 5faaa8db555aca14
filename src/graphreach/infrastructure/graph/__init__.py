"""NetworkX-backed graph engine."""

"""Command-line interface for CLIENTELE."""

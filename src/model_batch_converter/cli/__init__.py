"""Command-line interface for the batch converter."""

"""Command-line interface for kaku."""

"""Command-line interface for the War simulator."""

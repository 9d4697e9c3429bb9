"""Command line interface for Local News."""

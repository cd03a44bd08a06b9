"""Command-line interface for labelpath."""

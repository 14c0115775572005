"""Command-line entry points: API server, serial bridge and terminal dashboard."""

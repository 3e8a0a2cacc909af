"""Command-line entry points for tracksource."""

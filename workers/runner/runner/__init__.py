"""Command-line runner for the studydeck pipeline and scanners."""

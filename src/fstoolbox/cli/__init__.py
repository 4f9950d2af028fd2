"""Command-line interface for fstoolbox."""

"""File creation helpers."""

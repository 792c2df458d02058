"""Command line interface for safename."""

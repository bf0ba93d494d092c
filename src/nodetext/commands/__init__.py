"""nodetext CLI commands."""

"""Output layer: renders ServiceResult for the CLI."""

"""Infrastructure layer: database, store handle, and read repositories."""

"""Page object tree and error types."""

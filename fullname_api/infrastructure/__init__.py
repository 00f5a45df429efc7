"""Infrastructure layer - adapters for logging and HTTP transport."""

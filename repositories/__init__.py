"""In-memory data access for todos and users."""

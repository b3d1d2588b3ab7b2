"""HTTP routes and dependency providers."""

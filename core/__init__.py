"""Shared configuration, logging, errors and application state."""

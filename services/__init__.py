"""Business logic for accounts and todos."""

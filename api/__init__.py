"""Password Strength Advisor REST API."""

"""Auth controllers."""

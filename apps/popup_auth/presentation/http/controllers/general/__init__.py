"""General controllers."""

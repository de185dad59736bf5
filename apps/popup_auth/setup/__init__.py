"""Application setup (config, logging, tracing, DI)."""

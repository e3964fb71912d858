"""Domain models, persistence, and logging."""

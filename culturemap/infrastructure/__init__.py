"""Process-local infrastructure: caches, limiters, structured logging."""

"""Infrastructure adapters: versioned stores, cache, logging."""

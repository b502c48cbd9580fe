"""Core utilities: result types, errors, configuration, validation and the container."""

"""Domain layer: value objects, errors and protocols."""

"""Domain layer - entities, value objects, builder and exceptions."""

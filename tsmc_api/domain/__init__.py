"""Domain layer: entities, constants, exceptions and pure services."""

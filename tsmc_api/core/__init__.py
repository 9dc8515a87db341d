"""Core services: configuration, optimizer wiring and allocation dispatch."""

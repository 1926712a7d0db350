"""Core of a small entity-component-system game engine: scenes, entities, component pools and input actions."""

__version__ = "0.1.0"
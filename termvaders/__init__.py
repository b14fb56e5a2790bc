"""A small Space Invaders style shooter for the terminal: entities, key reading, the game loop and a command."""

__version__ = "0.1.0"
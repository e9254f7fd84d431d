"""A slugcat race with pixel-perfect collisions, played in a pygame window."""

__version__ = "1.0.0"
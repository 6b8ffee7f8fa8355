"""Route robots through a maze of rooms and tunnels, and replay recorded runs."""

__version__ = "0.1.0"
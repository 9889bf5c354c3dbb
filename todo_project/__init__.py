"""In-memory TODO list: JSON API backend and server-rendered frontend."""

__version__ = "0.1.0"

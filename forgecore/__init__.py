"""Core building blocks for a game engine: logging, memory tracking, containers, events, input and math."""

__version__ = "0.1.0"
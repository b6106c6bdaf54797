"""Core game-engine types: vectors, colours, debug logging, BC blocks and DDS headers."""

__version__ = "0.1.0"
__all__ = ["vectors", "color", "debug", "bc", "dds", "texflags"]
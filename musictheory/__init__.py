"""Notes, keys, chords and scales parsed from readable names."""

__version__ = "0.0.3"
__all__ = ["note", "chord", "key", "scale", "cli"]
"""Grid puzzle game in which numbered chains are grown uphill from their start cells."""

__version__ = "1.0.0"
__all__ = ["cardinal", "level", "game", "render", "cli"]
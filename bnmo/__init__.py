"""Game list, queue, history, scoreboards, save files and mini-games for a terminal game console."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Terminal Minesweeper with keyboard controls, difficulty templates and custom boards."""

__version__ = "1.0.0"
__all__ = ["__version__"]
"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow

__all__ = ["MainWindow"]

"""Interactive tab-bar shell for exploring section navigation."""
from .shell import SCREENS, Shell, register_screen

__all__ = ["SCREENS", "Shell", "register_screen"]

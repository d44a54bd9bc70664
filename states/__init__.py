"""States module exports"""

from .menu import MenuState, CallbackData

__all__ = ['MenuState', 'CallbackData']

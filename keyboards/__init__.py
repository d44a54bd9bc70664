"""Keyboards module exports"""

from .inline import get_main_menu_keyboard, get_ssh_menu_keyboard, get_menu_keyboard

__all__ = ['get_main_menu_keyboard', 'get_ssh_menu_keyboard', 'get_menu_keyboard']

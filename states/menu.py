"""Menu states and the callback identifiers carried by menu buttons"""

from enum import Enum


class MenuState(Enum):
    """Which inline menu is on screen"""
    MAIN = "main"
    SSH = "ssh"


class CallbackData(str, Enum):
    """Callback identifiers attached to inline buttons"""
    LIST_FILES = "list_files"
    SSH_MENU = "ssh_menu"
    SSH_ON = "ssh_on"
    SSH_OFF = "ssh_off"
    SETTINGS = "settings"
    LOGOUT = "logout"
    BACK = "back"

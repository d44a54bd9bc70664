"""Recognized bot commands and how text and button presses map to them"""

from dataclasses import dataclass
from enum import Enum

from states import CallbackData


class Command(Enum):
    """Closed set of actions the router understands"""
    START = "start"
    HELP = "help"
    PING = "ping"
    SSH_STATUS = "ssh_status"
    SSH_ENABLE = "ssh_enable"
    SSH_DISABLE = "ssh_disable"
    LOGOUT = "logout"
    LIST_FILES = "list_files"
    SETTINGS = "settings"
    MAIN_MENU = "main_menu"
    UNKNOWN = "unknown"


SSH_USAGE = "Usage: /ssh [on|off] - Get SSH status or enable/disable SSH"
LS_USAGE = "Usage: /ls path\nExample: /ls /volume1/homes"

SSH_ON_WORDS = ("on", "enable")
SSH_OFF_WORDS = ("off", "disable")

# Commands that need no argument parsing
SIMPLE_COMMANDS = {
    "start": Command.START,
    "help": Command.HELP,
    "ping": Command.PING,
    "logout": Command.LOGOUT,
    "setnas": Command.SETTINGS,
    "menu": Command.MAIN_MENU,
}

CALLBACK_COMMANDS = {
    CallbackData.SSH_MENU: Command.SSH_STATUS,
    CallbackData.SSH_ON: Command.SSH_ENABLE,
    CallbackData.SSH_OFF: Command.SSH_DISABLE,
    CallbackData.LOGOUT: Command.LOGOUT,
    CallbackData.LIST_FILES: Command.LIST_FILES,
    CallbackData.SETTINGS: Command.SETTINGS,
    CallbackData.BACK: Command.MAIN_MENU,
}


@dataclass(frozen=True)
class ParsedCommand:
    """A command plus whatever was parsed out of the raw text"""
    command: Command
    argument: str | None = None
    usage: str | None = None


def _command_name(token: str) -> str:
    """'/SSH@my_bot' -> 'ssh'"""
    return token.lstrip("/").split("@", 1)[0].lower()


def parse_command_text(text: str | None) -> ParsedCommand:
    """Turn a chat message like '/ssh off' into a ParsedCommand"""
    parts = (text or "").split()
    if not parts or not parts[0].startswith("/"):
        return ParsedCommand(Command.UNKNOWN)

    name = _command_name(parts[0])
    args = parts[1:]

    if name in SIMPLE_COMMANDS:
        return ParsedCommand(SIMPLE_COMMANDS[name])

    if name == "ssh":
        if not args:
            return ParsedCommand(Command.SSH_STATUS)
        mode = args[0].lower()
        if len(args) == 1 and mode in SSH_ON_WORDS:
            return ParsedCommand(Command.SSH_ENABLE)
        if len(args) == 1 and mode in SSH_OFF_WORDS:
            return ParsedCommand(Command.SSH_DISABLE)
        return ParsedCommand(Command.UNKNOWN, usage=SSH_USAGE)

    if name == "ls":
        if not args:
            return ParsedCommand(Command.LIST_FILES, usage=LS_USAGE)
        # Shared folder names may contain spaces
        return ParsedCommand(Command.LIST_FILES, argument=" ".join(args))

    return ParsedCommand(Command.UNKNOWN)


def parse_callback_data(data: str | None) -> ParsedCommand:
    """Turn a button's callback identifier into a ParsedCommand"""
    try:
        callback = CallbackData(data)
    except ValueError:
        return ParsedCommand(Command.UNKNOWN)
    command = CALLBACK_COMMANDS[callback]
    if command is Command.LIST_FILES:
        return ParsedCommand(command, usage=LS_USAGE)
    return ParsedCommand(command)

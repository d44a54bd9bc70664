"""Models module exports"""

from .session import NasSession, FileEntry, parse_ssh_status
from .commands import Command, ParsedCommand, parse_command_text, parse_callback_data

__all__ = [
    'NasSession',
    'FileEntry',
    'parse_ssh_status',
    'Command',
    'ParsedCommand',
    'parse_command_text',
    'parse_callback_data'
]

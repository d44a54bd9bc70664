"""Handlers module exports"""

from .access import restricted, is_authorized
from .router import Reply, dispatch
from .commands import text_command, COMMAND_NAMES
from .callbacks import menu_callback
from .inline import inline_query, build_inline_results

__all__ = [
    'restricted',
    'is_authorized',
    'Reply',
    'dispatch',
    'text_command',
    'COMMAND_NAMES',
    'menu_callback',
    'inline_query',
    'build_inline_results'
]

"""Command router - the single place commands turn into NAS calls and replies"""

import logging
from dataclasses import dataclass

from telegram import InlineKeyboardMarkup

from api_client import SynologyClient
from errors import NasError
from keyboards import get_menu_keyboard
from models import Command, ParsedCommand
from states import MenuState
from utils import format_file_list

logger = logging.getLogger(__name__)

MENU_PROMPT = "Please select an option from the menu below:"

HELP_TEXT = (
    "🤖 *Synology NAS Bot*\n\n"
    "*Available commands:*\n"
    "/start - Show the interactive menu\n"
    "/menu - Show the main menu\n"
    "/help - Show this message\n"
    "/ping - Check if the bot is running\n"
    "/ssh - Get SSH service status\n"
    "/ssh on|off - Enable or disable SSH\n"
    "/ls path - List files in a folder\n"
    "/logout - End the NAS session\n"
    "/setnas - Show how the NAS connection is configured\n\n"
    "*Configuration:*\n"
    "Settings come from environment variables:\n"
    "- SYNOLOGY\\_NAS\\_BASE\\_URL - base URL of the NAS, e.g. http://nas:5000\n"
    "- SYNOLOGY\\_USERNAME / SYNOLOGY\\_PASSWORD - NAS account\n"
    "- FORCE\\_IPV4 - set to true if SSH control fails with error 105"
)

SETTINGS_TEXT = (
    "⚙️ Synology settings are configured via environment variables "
    "(SYNOLOGY_NAS_BASE_URL, SYNOLOGY_USERNAME, SYNOLOGY_PASSWORD, FORCE_IPV4). "
    "They cannot be changed via Telegram."
)


@dataclass
class Reply:
    """One outbound response: text plus optional inline keyboard"""
    text: str
    reply_markup: InlineKeyboardMarkup | None = None
    ok: bool = True
    parse_mode: str | None = None


def _error_reply(prefix: str, error: NasError) -> Reply:
    return Reply(
        f"❌ {prefix}: {error.message}",
        reply_markup=get_menu_keyboard(MenuState.MAIN),
        ok=False
    )


async def dispatch(parsed: ParsedCommand, client: SynologyClient) -> Reply:
    """Run at most one NAS operation for a command and build its reply"""
    command = parsed.command

    if command is Command.START:
        return Reply(
            f"👋 Welcome to your Synology NAS bot!\n\n{MENU_PROMPT}",
            reply_markup=get_menu_keyboard(MenuState.MAIN)
        )

    if command is Command.HELP:
        return Reply(
            HELP_TEXT,
            reply_markup=get_menu_keyboard(MenuState.MAIN),
            parse_mode="Markdown"
        )

    if command is Command.PING:
        return Reply("🏓 Pong! Bot is running.")

    if command is Command.MAIN_MENU:
        return Reply(MENU_PROMPT, reply_markup=get_menu_keyboard(MenuState.MAIN))

    if command is Command.SETTINGS:
        return Reply(SETTINGS_TEXT)

    if command is Command.SSH_STATUS:
        try:
            enabled = await client.get_ssh_status()
        except NasError as e:
            return _error_reply("Failed to get SSH status", e)
        status_text = "enabled ✅" if enabled else "disabled ❌"
        return Reply(
            f"🖥️ SSH Control Menu\n\nSSH service is currently {status_text}",
            reply_markup=get_menu_keyboard(MenuState.SSH)
        )

    if command in (Command.SSH_ENABLE, Command.SSH_DISABLE):
        enable = command is Command.SSH_ENABLE
        try:
            await client.set_ssh_enabled(enable)
        except NasError as e:
            return _error_reply(f"Failed to {'enable' if enable else 'disable'} SSH service", e)
        return Reply(
            f"✅ SSH service has been {'enabled' if enable else 'disabled'}.\n\n{MENU_PROMPT}",
            reply_markup=get_menu_keyboard(MenuState.MAIN)
        )

    if command is Command.LOGOUT:
        was_logged_in = client.authenticated
        try:
            await client.logout()
        except NasError as e:
            return _error_reply("Logout failed, local session was cleared anyway", e)
        text = "🚪 Logged out from Synology NAS." if was_logged_in else "ℹ️ No active NAS session."
        return Reply(text, reply_markup=get_menu_keyboard(MenuState.MAIN))

    if command is Command.LIST_FILES:
        if not parsed.argument:
            return Reply(parsed.usage or "Usage: /ls path")
        try:
            entries = await client.list_files(parsed.argument)
        except NasError as e:
            return _error_reply("Failed to list files", e)
        return Reply(format_file_list(parsed.argument, entries))

    if command is Command.UNKNOWN:
        return Reply(parsed.usage or "❓ Unknown command. Use /help to see available commands.", ok=False)

    raise ValueError(f"Unhandled command: {command}")

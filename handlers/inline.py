"""Inline query handler - command suggestions in the input line"""

from telegram import InlineQueryResultArticle, InputTextMessageContent, Update
from telegram.ext import ContextTypes

from .access import restricted

# (command text, title, description)
INLINE_COMMANDS = [
    ("/start", "Menu", "Show the interactive menu"),
    ("/help", "Help", "Show available commands"),
    ("/ping", "Ping", "Check if the bot is running"),
    ("/ssh", "SSH status", "Get SSH service status"),
    ("/ssh on", "Enable SSH", "Enable the SSH service"),
    ("/ssh off", "Disable SSH", "Disable the SSH service"),
    ("/ls /volume1", "List files", "List files in a folder"),
    ("/logout", "Logout", "End the NAS session"),
    ("/menu", "Main menu", "Show the main menu"),
    ("/setnas", "Settings", "Show how the NAS connection is configured"),
]


def build_inline_results(query_text: str = "") -> list[InlineQueryResultArticle]:
    """Static command list, narrowed to entries matching the typed text"""
    needle = query_text.strip().lower().lstrip("/")
    results = []
    for index, (command, title, description) in enumerate(INLINE_COMMANDS):
        haystack = f"{command} {title}".lower()
        if needle and needle not in haystack:
            continue
        results.append(
            InlineQueryResultArticle(
                id=str(index),
                title=title,
                description=description,
                input_message_content=InputTextMessageContent(command)
            )
        )
    return results


@restricted
async def inline_query(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Answer inline queries with the available commands"""
    query = update.inline_query
    await query.answer(build_inline_results(query.query), cache_time=0)

"""Text command handlers"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from models import parse_command_text
from .access import restricted
from .router import dispatch

logger = logging.getLogger(__name__)

# Slash commands routed through the dispatcher
COMMAND_NAMES = ["start", "help", "ping", "ssh", "ls", "logout", "setnas", "menu"]


@restricted
async def text_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle any supported slash command"""
    message = update.effective_message
    text = message.text
    logger.info(f"Received command: {text.split()[0] if text else ''}")

    parsed = parse_command_text(text)
    reply = await dispatch(parsed, context.bot_data["nas_client"])

    await message.reply_text(
        reply.text,
        reply_markup=reply.reply_markup,
        parse_mode=reply.parse_mode
    )

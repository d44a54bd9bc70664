"""Inline button handlers"""

import logging
from telegram import Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from models import Command, parse_callback_data
from utils import truncate
from utils.formatters import MAX_CALLBACK_ANSWER_LENGTH
from .access import restricted
from .router import Reply, dispatch

logger = logging.getLogger(__name__)


async def _show(update: Update, context: ContextTypes.DEFAULT_TYPE, reply: Reply):
    """Edit the menu message in place, or post a new message for plain replies"""
    query = update.callback_query

    if reply.reply_markup is None:
        if update.effective_chat:
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text=reply.text,
                parse_mode=reply.parse_mode
            )
        return

    try:
        await query.edit_message_text(
            text=reply.text,
            reply_markup=reply.reply_markup,
            parse_mode=reply.parse_mode
        )
    except BadRequest as e:
        # Pressing the same button twice re-renders identical content
        if "not modified" not in str(e).lower():
            raise
        logger.debug(f"Menu message unchanged: {e}")


@restricted
async def menu_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle every menu button press. Each press is answered exactly once."""
    query = update.callback_query
    logger.info(f"Received callback: {query.data}")

    parsed = parse_callback_data(query.data)
    reply = None
    try:
        reply = await dispatch(parsed, context.bot_data["nas_client"])
    finally:
        if reply is not None and not reply.ok:
            await query.answer(truncate(reply.text, MAX_CALLBACK_ANSWER_LENGTH), show_alert=True)
        else:
            await query.answer()

    if parsed.command is Command.UNKNOWN:
        logger.warning(f"Unknown callback data: {query.data}")
        return

    await _show(update, context, reply)

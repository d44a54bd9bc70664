"""Access guard - only the configured chat may use the bot"""

import logging
from functools import wraps

from telegram import Update
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)


def _origin_id(update: Update) -> int | None:
    """Chat id for messages and callbacks, sender id where no chat exists"""
    if update.inline_query:
        return update.inline_query.from_user.id
    if update.effective_chat:
        return update.effective_chat.id
    if update.effective_user:
        return update.effective_user.id
    return None


def _denial_text(update: Update, origin_id: int | None) -> str:
    user = update.effective_user
    name = user.first_name if user else "Unknown"
    return (
        f"🚫 You ({name}) are not authorized to use this bot. "
        f"Your chat ID {origin_id} is not allowed."
    )


def is_authorized(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    allowed_chat_id = context.bot_data["settings"].allowed_chat_id
    return _origin_id(update) == allowed_chat_id


def restricted(func):
    """Decorator rejecting updates from any chat but the allowed one"""
    @wraps(func)
    async def wrapped(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        if is_authorized(update, context):
            return await func(update, context, *args, **kwargs)

        origin_id = _origin_id(update)
        user = update.effective_user
        logger.warning(
            f"Unauthorized access attempt from user {user.first_name if user else 'Unknown'} "
            f"with chat ID {origin_id}"
        )

        if update.callback_query:
            await update.callback_query.answer(_denial_text(update, origin_id), show_alert=True)
        elif update.inline_query:
            # Inline queries are dropped without an answer
            pass
        elif update.effective_message:
            await update.effective_message.reply_text(_denial_text(update, origin_id))
        return None
    return wrapped

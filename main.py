"""
Telegram bot for controlling a Synology NAS
One allowed chat, one NAS session: commands and menu buttons -> DSM Web API
"""

import logging
import sys
from telegram import BotCommand, MenuButtonCommands, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    InlineQueryHandler,
)

from api_client import SynologyClient
from config import Settings, load_settings
from errors import ConfigError
from handlers import COMMAND_NAMES, inline_query, menu_callback, text_command

# Logging setup
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
# httpx logs full request URLs at INFO, and DSM login puts the password in the query
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

BOT_COMMANDS = [
    BotCommand("start", "Show the interactive menu"),
    BotCommand("help", "Display the help message"),
    BotCommand("ping", "Check if the bot is running"),
    BotCommand("ssh", "SSH status, or /ssh on|off"),
    BotCommand("ls", "List files: /ls path"),
    BotCommand("logout", "End the NAS session"),
    BotCommand("menu", "Show the main menu"),
    BotCommand("setnas", "Show the NAS connection settings"),
]


async def post_init(application: Application) -> None:
    """Publish the command list and show it behind the chat menu button"""
    me = await application.bot.get_me()
    logger.info(f"Bot username: @{me.username}")
    await application.bot.set_my_commands(BOT_COMMANDS)
    await application.bot.set_chat_menu_button(menu_button=MenuButtonCommands())


async def post_shutdown(application: Application) -> None:
    """Log out from the NAS and release the HTTP client"""
    client: SynologyClient = application.bot_data["nas_client"]
    await client.shutdown()


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors that escaped a handler so polling keeps going"""
    logger.error("Unhandled error while processing update", exc_info=context.error)


def register_handlers(application: Application) -> None:
    """Register all bot handlers"""
    application.add_handler(CommandHandler(COMMAND_NAMES, text_command))
    application.add_handler(CallbackQueryHandler(menu_callback))
    application.add_handler(InlineQueryHandler(inline_query))
    application.add_error_handler(error_handler)


def build_application(settings: Settings) -> Application:
    """Create the application with the NAS client and settings in bot_data"""
    application = (
        Application.builder()
        .token(settings.telegram_bot_token)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )
    application.bot_data["settings"] = settings
    application.bot_data["nas_client"] = SynologyClient.from_settings(settings)

    register_handlers(application)
    return application


def main():
    """Start the bot"""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"Initializing Synology client with base URL: {settings.synology_nas_base_url}")
    if settings.force_ipv4:
        logger.info("IPv4 is forced for NAS requests")

    application = build_application(settings)

    # Start the bot
    logger.info("Starting bot...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()

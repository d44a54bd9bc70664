"""Inline keyboards for the bot"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from states import CallbackData, MenuState


def get_main_menu_keyboard() -> InlineKeyboardMarkup:
    """Get main menu keyboard"""
    keyboard = [
        [InlineKeyboardButton("📁 List Files", callback_data=CallbackData.LIST_FILES.value)],
        [InlineKeyboardButton("🖥️ SSH Control", callback_data=CallbackData.SSH_MENU.value)],
        [
            InlineKeyboardButton("⚙️ Settings", callback_data=CallbackData.SETTINGS.value),
            InlineKeyboardButton("🚪 Logout", callback_data=CallbackData.LOGOUT.value)
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


def get_ssh_menu_keyboard() -> InlineKeyboardMarkup:
    """Get SSH submenu with Enable, Disable and Back buttons"""
    keyboard = [
        [
            InlineKeyboardButton("✅ Enable SSH", callback_data=CallbackData.SSH_ON.value),
            InlineKeyboardButton("❌ Disable SSH", callback_data=CallbackData.SSH_OFF.value)
        ],
        [
            InlineKeyboardButton("🔙 Back to Main Menu", callback_data=CallbackData.BACK.value)
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


def get_menu_keyboard(state: MenuState) -> InlineKeyboardMarkup:
    """Get the keyboard for a menu state"""
    if state is MenuState.SSH:
        return get_ssh_menu_keyboard()
    return get_main_menu_keyboard()

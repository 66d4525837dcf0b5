from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from moviemagnet.bot.presenter import LinkButton


def download_keyboard(rows: tuple[tuple[LinkButton, ...], ...]) -> InlineKeyboardMarkup:
    """
    rows: ((LinkButton(label, url),), ...) -> URL buttons, row layout kept.
    """
    kb = InlineKeyboardBuilder()
    for row in rows:
        kb.row(*(InlineKeyboardButton(text=b.label, url=b.url) for b in row))
    return kb.as_markup()

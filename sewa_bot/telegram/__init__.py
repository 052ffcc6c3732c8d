# sewa_bot/telegram/__init__.py
from .ux import (
    NOT_AUTHORIZED_TEXT,
    build_help,
    build_welcome,
)

__all__ = [
    "NOT_AUTHORIZED_TEXT",
    "build_help",
    "build_welcome",
]

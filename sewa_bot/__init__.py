"""
SEWA Village bot.

Receives updates from village admins over Telegram, classifies them with
a language model and publishes them to the website's GitHub repository.
"""

__version__ = "1.0.0"

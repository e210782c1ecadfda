from .bot_validation import BotValidation

__all__ = ["BotValidation"]

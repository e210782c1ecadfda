"""
Bot validation for all chat endpoints.
Every check raises ValidationException before any processing starts.
"""

# Python Packages
from typing import List

# Schemas
from ..schemas import CHAT_ROLES, ROLE_USER, ChatMessage

# Config
from ..config import bot_config

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Utils
from ...util import currency as currency_util





class BotValidation:

    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_session_id(session_id):
        if not session_id or not isinstance(session_id, str) or not session_id.strip():
            raise ValidationException(
                error_code = "MISSING_SESSION_ID",
                message = messages.ERROR["MISSING_SESSION_ID"]
            )


    @staticmethod
    def validate_user_id(user_id):
        """ user_id is optional; when sent it must be a non-empty string... """

        if user_id is None:
            return

        if not isinstance(user_id, str) or len(user_id.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_USER_ID",
                message = messages.ERROR["INVALID_USER_ID"]
            )


    @staticmethod
    def validate_messages(raw_messages) -> List[ChatMessage]:
        """
        Validate the conversation sent with a turn and convert it.
        The last message must come from the user.
        """

        if not raw_messages or not isinstance(raw_messages, list):
            raise ValidationException(
                error_code = "MISSING_MESSAGES",
                message = messages.ERROR["MISSING_MESSAGES"]
            )

        chat_messages = []
        for item in raw_messages:
            if not isinstance(item, dict):
                raise ValidationException(error_code = "INVALID_MESSAGE", message = messages.ERROR["INVALID_MESSAGE"])

            role    = item.get("role")
            content = item.get("content")

            if (
                role not in CHAT_ROLES
                or not isinstance(content, str)
                or not content.strip()
                or len(content) > bot_config.MAX_MESSAGE_LENGTH
            ):
                raise ValidationException(error_code = "INVALID_MESSAGE", message = messages.ERROR["INVALID_MESSAGE"])

            chat_messages.append(ChatMessage(role = role, content = content.strip()))

        if chat_messages[-1].role != ROLE_USER:
            raise ValidationException(
                error_code = "LAST_MESSAGE_NOT_USER",
                message = messages.ERROR["LAST_MESSAGE_NOT_USER"]
            )

        return chat_messages


    @staticmethod
    def validate_currency(currency) -> str:
        if currency is None:
            return currency_util.DEFAULT_CURRENCY

        if not isinstance(currency, str) or not currency_util.is_supported(currency):
            raise ValidationException(
                error_code = "UNSUPPORTED_CURRENCY",
                message = messages.ERROR["UNSUPPORTED_CURRENCY"].format(currency)
            )

        return currency.upper()


    @staticmethod
    def validate_feedback(conversation_id, rating, message_id = None):
        if conversation_id is None or rating is None:
            raise ValidationException(
                error_code = "MISSING_CONVERSATION_ID",
                message = messages.ERROR["MISSING_CONVERSATION_ID"]
            )

        for value in (conversation_id, message_id):
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValidationException(
                    error_code = "INVALID_REQUEST",
                    message = messages.ERROR["INVALID_REQUEST"]
                )

        if (
            isinstance(rating, bool)
            or not isinstance(rating, int)
            or not bot_config.MIN_RATING <= rating <= bot_config.MAX_RATING
        ):
            raise ValidationException(
                error_code = "INVALID_RATING",
                message = messages.ERROR["INVALID_RATING"]
            )


    @staticmethod
    def validate_learning_status(status, allow_all = False):
        allowed = bot_config.LEARNING_STATUSES + (("all",) if allow_all else ())

        if status not in allowed:
            raise ValidationException(
                error_code = "INVALID_LEARNING_STATUS",
                message = messages.ERROR["INVALID_LEARNING_STATUS"].format(", ".join(allowed))
            )


    @staticmethod
    def validate_learning_ids(ids):
        if (
            not ids
            or not isinstance(ids, list)
            or any(isinstance(value, bool) or not isinstance(value, int) for value in ids)
        ):
            raise ValidationException(
                error_code = "INVALID_LEARNING_IDS",
                message = messages.ERROR["INVALID_LEARNING_IDS"]
            )

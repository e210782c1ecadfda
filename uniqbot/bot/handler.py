"""
Bot Handler
API endpoints for the support chatbot.
"""

# Python Packages
import logging

from flask import request
from flask_restx import Namespace, Resource

# Validations
from .validations import BotValidation

# Controller
from .controller import BotController

# Exceptions & messages
from ..util.exceptions import AppException, InternalServerException, ProcessingException, ValidationException
from ..util import messages

logger = logging.getLogger(__name__)

# Namespace
chat_namespace = Namespace("chat", description="Support chatbot turns, feedback and learning queue")





# ── POST /chat/turn ───────────────────────────────────────────────────────────
@chat_namespace.route("/turn")
class SubmitTurn(Resource):
    """ Answer the latest user message of a chat... """

    def post(self):
        """
        Submit a chat turn.

        Request:
        {
            "session_id": "abc-xyz",
            "user_id":    "user-123",        // optional
            "currency":   "EUR",             // optional, default USD
            "messages": [
                {"role": "user",      "content": "Hi"},
                {"role": "assistant", "content": "Hello! How can I help?"},
                {"role": "user",      "content": "Where is my order?"}
            ]
        }

        Response:
        {
            "status": "success",
            "data": {
                "response_text":      "You can track your order ...",
                "confidence":         0.8,
                "pattern_matched":    "12",
                "suggestions":        ["Check order status", ...],
                "conversation_id":    41,
                "user_message_id":    301,
                "bot_message_id":     302,
                "processing_time_ms": 37
            }
        }
        """

        try:
            data = request.get_json(silent = True)
            BotValidation.validate_body(data)

            session_id = data.get("session_id")
            user_id    = data.get("user_id")

            BotValidation.validate_session_id(session_id)
            BotValidation.validate_user_id(user_id)
            chat_messages = BotValidation.validate_messages(data.get("messages"))
            currency      = BotValidation.validate_currency(data.get("currency"))

            result = BotController().submit_turn(
                session_id = session_id.strip(),
                messages = chat_messages,
                user_id = user_id.strip() if user_id else None,
                currency = currency
            )

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unexpected error in POST /chat/turn")
            error = ProcessingException(details = str(error))
            return error.to_dict(), error.status_code



# ── PUT /chat/feedback ────────────────────────────────────────────────────────
@chat_namespace.route("/feedback")
class SubmitFeedback(Resource):
    """ Rate a bot message or a whole conversation... """

    def put(self):
        """
        Submit feedback.

        Request:
        {
            "conversation_id": 41,
            "message_id":      302,          // optional, omit to rate the conversation
            "rating":          5,            // 1-5
            "comment":         "Spot on",    // optional
            "feedback_type":   "helpful"     // optional
        }
        """

        try:
            data = request.get_json(silent = True)
            BotValidation.validate_body(data)

            conversation_id = data.get("conversation_id")
            message_id      = data.get("message_id")
            rating          = data.get("rating")

            BotValidation.validate_feedback(conversation_id, rating, message_id)

            result = BotController().submit_feedback(
                conversation_id = conversation_id,
                rating = rating,
                message_id = message_id,
                comment = data.get("comment"),
                feedback_type = data.get("feedback_type")
            )

            return {"status": "success", "message": messages.SUCCESS["FEEDBACK_RECORDED"], "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unexpected error in PUT /chat/feedback")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── GET /chat/patterns ────────────────────────────────────────────────────────
@chat_namespace.route("/patterns")
class PatternList(Resource):
    """ Knowledge currently used by the pattern matcher... """

    def get(self):
        try:
            return {"status": "success", "data": BotController().list_patterns()}, 200

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── GET /chat/learning ────────────────────────────────────────────────────────
@chat_namespace.route("/learning")
class LearningList(Resource):
    """ Review queue of unanswered questions... """

    def get(self):
        """ List learning entries; ?status=pending|implemented|needs_improvement|dismissed|all... """

        try:
            status = request.args.get("status", "all")
            BotValidation.validate_learning_status(status, allow_all = True)

            return {"status": "success", "data": BotController().list_learning(status)}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── GET /chat/learning/analytics ──────────────────────────────────────────────
@chat_namespace.route("/learning/analytics")
class LearningAnalytics(Resource):
    """ Usage report over the last 30 days... """

    def get(self):
        try:
            return {"status": "success", "data": BotController().learning_analytics()}, 200

        except Exception as error:
            logger.exception("❌ Unexpected error in GET /chat/learning/analytics")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /chat/learning/bulk-implement ────────────────────────────────────────
@chat_namespace.route("/learning/bulk-implement")
class LearningBulkImplement(Resource):

    def post(self):
        """
        Turn several answered learning entries into patterns at once.

        Request:
        {
            "ids":         [3, 7, 12],
            "reviewed_by": "admin@uniqverse.com"   // optional
        }

        Entries without an expected response are skipped.
        """

        try:
            data = request.get_json(silent = True)
            BotValidation.validate_body(data)

            learning_ids = data.get("ids")
            BotValidation.validate_learning_ids(learning_ids)

            result = BotController().bulk_implement(learning_ids, reviewed_by = data.get("reviewed_by"))
            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unexpected error in POST /chat/learning/bulk-implement")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── PUT /chat/learning/<learning_id> ──────────────────────────────────────────
@chat_namespace.route("/learning/<int:learning_id>")
class LearningReview(Resource):

    def put(self, learning_id):
        """
        Review a learning entry.

        Request:
        {
            "status":            "implemented",
            "expected_response": "You can change ...",   // optional
            "reviewed_by":       "admin@uniqverse.com"   // optional
        }

        Marking an entry "implemented" with an expected response creates a
        new pattern for it.
        """

        try:
            data = request.get_json(silent = True)
            BotValidation.validate_body(data)

            status = data.get("status")
            BotValidation.validate_learning_status(status)

            result = BotController().review_learning(
                learning_id = learning_id,
                status = status,
                expected_response = data.get("expected_response"),
                reviewed_by = data.get("reviewed_by")
            )

            return {"status": "success", "message": messages.SUCCESS["LEARNING_UPDATED"], "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unexpected error in PUT /chat/learning/%s", learning_id)
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /chat/learning/auto-learn ────────────────────────────────────────────
@chat_namespace.route("/learning/auto-learn")
class AutoLearn(Resource):

    def post(self):
        """
        Queue low-confidence answers from recent well-rated conversations.

        Request (optional):
        {
            "days":  7,        // look-back window, default 7
            "async": true      // hand the job to the Celery worker
        }
        """

        try:
            data = request.get_json(silent = True) or {}
            days = data.get("days")

            if days is not None and (isinstance(days, bool) or not isinstance(days, int) or days < 1):
                raise ValidationException(
                    error_code = "INVALID_DAYS",
                    message = messages.ERROR["INVALID_DAYS"]
                )

            result = BotController().auto_learn(days, run_async = bool(data.get("async", False)))
            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("❌ Unexpected error in POST /chat/learning/auto-learn")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code

"""
Bot Controller
Orchestrates between handler and service layer.
"""

# Python Packages
from typing import List, Optional

# Schemas
from .schemas import ChatMessage

# Services
from .services.turn_service import ChatTurnService
from .services.conversation_service import ConversationService
from .services.knowledge_service import KnowledgeService
from .services.learning_service import LearningService

# Tasks
from .tasks.learning_tasks import auto_learn_task

# Config
from .config import bot_config





class BotController:

    def __init__(self):
        """ Initialize services... """

        self.knowledge_service    = KnowledgeService()
        self.conversation_service = ConversationService()
        self.learning_service     = LearningService(self.knowledge_service)



    def submit_turn(
        self,
        session_id: str,
        messages: List[ChatMessage],
        user_id: Optional[str] = None,
        currency: str = "USD"
    ) -> dict:
        """
        Answer the last user message of a conversation.

        Returns:
            Dict with response_text, confidence, pattern_matched, suggestions,
            conversation_id, user_message_id, bot_message_id, processing_time_ms.
        """

        turn_service = ChatTurnService(
            knowledge_service    = self.knowledge_service,
            conversation_service = self.conversation_service,
            learning_service     = self.learning_service
        )

        result = turn_service.submit_turn(
            session_id = session_id,
            messages   = messages,
            user_id    = user_id,
            currency   = currency
        )
        return result.to_dict()



    def submit_feedback(
        self,
        conversation_id: int,
        rating: int,
        message_id: Optional[int] = None,
        comment: Optional[str] = None,
        feedback_type: Optional[str] = None
    ) -> dict:
        """ Store a rating for a message or, without message_id, the whole conversation... """

        self.conversation_service.submit_feedback(
            conversation_id = conversation_id,
            rating          = rating,
            message_id      = message_id,
            comment         = comment,
            feedback_type   = feedback_type
        )
        return {"success": True}



    def list_patterns(self) -> dict:
        """ Active patterns (priority order) and fallbacks currently served... """

        patterns, fallbacks = self.knowledge_service.load()
        return {
            "patterns": [
                {
                    "id":       pattern.pattern_id,
                    "priority": pattern.priority,
                    "response": pattern.response,
                    "triggers": list(pattern.triggers),
                }
                for pattern in patterns
            ],
            "fallbacks": [
                {"id": fallback.fallback_id, "response": fallback.response}
                for fallback in fallbacks
            ],
        }



    def list_learning(self, status: Optional[str] = None) -> dict:
        entries = self.learning_service.list_entries(status)
        return {"status": status or "all", "entries": entries, "total": len(entries)}



    def review_learning(
        self,
        learning_id: int,
        status: str,
        expected_response: Optional[str] = None,
        reviewed_by: Optional[str] = None
    ) -> dict:
        return self.learning_service.review_entry(
            learning_id       = learning_id,
            status            = status,
            expected_response = expected_response,
            reviewed_by       = reviewed_by
        )



    def bulk_implement(self, learning_ids: List[int], reviewed_by: Optional[str] = None) -> dict:
        implemented = self.learning_service.bulk_implement(learning_ids, reviewed_by = reviewed_by)
        return {"implemented": implemented, "requested": len(learning_ids)}



    def learning_analytics(self) -> dict:
        """ 30-day usage report: volumes, satisfaction, topics, trends and pattern usage... """

        return self.learning_service.analytics()



    def auto_learn(self, days: Optional[int] = None, run_async: bool = False) -> dict:
        """ Queue low-confidence answers from well-rated chats, inline or as a background task... """

        days = days or bot_config.AUTO_LEARN_DAYS

        if run_async:
            task = auto_learn_task.delay(days)
            return {"processing_mode": "async", "task_id": task.id}

        queued = self.learning_service.auto_learn_from_conversations(days = days)
        return {"processing_mode": "sync", "queued": queued}

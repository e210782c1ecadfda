"""
Learning Background Tasks
"""

# Python Packages
from celery import shared_task

# Services only (NO controller import)
from ..services.learning_service import LearningService

# Config
from ..config import bot_config





@shared_task(bind=True, max_retries=3)
def auto_learn_task(self, days: int = bot_config.AUTO_LEARN_DAYS):
    """
    Background task: queue low-confidence answers from recent well-rated
    conversations for review. Meant to be scheduled (e.g. nightly).
    """

    from ...app import app

    try:
        with app.app_context():
            return LearningService().auto_learn_from_conversations(days = days)

    except Exception as e:
        raise self.retry(exc = e, countdown = 60)

"""
Model: ChatbotLearning
Table: chatbot_learning

Review queue of questions the bot could not answer well. Entries are
created or incremented by the chat engine and reviewed by an admin:

  pending          : waiting for review (de-duplicated by message prefix)
  implemented      : reviewed; usually turned into a pattern
  needs_improvement: answered, but rated poorly
  dismissed        : reviewed and ignored
"""

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow


class ChatbotLearning(db.Model):
    """A queued user question awaiting human review."""

    __tablename__ = "chatbot_learning"

    learning_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    user_message = db.Column(TEXT, nullable=False)

    expected_response = db.Column(
        TEXT,
        nullable=True,
        doc="Answer supplied by a reviewer or taken from a well-rated conversation."
    )

    frequency = db.Column(db.Integer, nullable=False, default=1)

    status = db.Column(
        db.String(30),
        nullable=False,
        default="pending",
        index=True
    )

    last_occurred = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    reviewed_by = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow
    )

    def to_dict(self) -> dict:
        return {
            "id":                self.learning_id,
            "user_message":      self.user_message,
            "expected_response": self.expected_response,
            "frequency":         self.frequency,
            "status":            self.status,
            "last_occurred":     self.last_occurred.isoformat() if self.last_occurred else None,
            "reviewed_by":       self.reviewed_by,
        }

    def __repr__(self):
        return f"<ChatbotLearning {self.learning_id} status={self.status} x{self.frequency}>"

"""
Model: ChatbotConversation
Table: chatbot_conversations

One row per chat session. Created on the first turn of a session and
updated on every turn (message count, tags, ended_at). Never deleted by
the chat engine.
"""

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow


class ChatbotConversation(db.Model):
    """A support chat session between a shopper and the bot."""

    __tablename__ = "chatbot_conversations"

    conversation_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    session_id = db.Column(
        db.String(255),
        nullable=False,
        index=True,
        doc="Client-supplied session identifier."
    )

    user_id = db.Column(
        db.String(255),
        nullable=True,
        doc="Signed-in shopper, if any."
    )

    started_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    ended_at = db.Column(
        db.DateTime(timezone=True),
        nullable=True,
        doc="Time of the latest recorded turn."
    )

    total_messages = db.Column(db.Integer, nullable=False, default=0)

    tags = db.Column(
        db.JSON,
        nullable=False,
        default=list,
        doc="Topics of the latest turn. Overwritten every turn."
    )

    satisfaction_rating = db.Column(
        db.Integer,
        nullable=True,
        doc="1-5, set by conversation-level feedback."
    )

    messages = db.relationship(
        "ChatbotMessage",
        backref="conversation",
        order_by="ChatbotMessage.message_id",
        lazy="select"
    )

    def __repr__(self):
        return f"<ChatbotConversation {self.conversation_id} session={self.session_id}>"

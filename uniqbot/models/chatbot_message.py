"""
Model: ChatbotMessage
Table: chatbot_messages

An individual message in a conversation. Written in user/assistant pairs,
one pair per turn, and never modified afterwards. Only assistant rows carry
pattern_matched / confidence / processing_time_ms.
"""

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow





class ChatbotMessage(db.Model):
    """ One message (user or assistant turn) in a conversation... """

    # Table Name
    __tablename__ = "chatbot_messages"

    message_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.Integer,
        db.ForeignKey("chatbot_conversations.conversation_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "'user' or 'assistant'."
    )

    content = db.Column(TEXT, nullable = False)

    timestamp = db.Column(db.DateTime(timezone = True), nullable = False, default = utcnow)

    pattern_matched = db.Column(
        db.String(100),
        nullable = True,
        doc = "Pattern id or product search tag that produced the answer."
    )

    confidence = db.Column(db.Float, nullable = True)

    processing_time_ms = db.Column(db.Integer, nullable = True)

    def __repr__(self):
        return f"<ChatbotMessage {self.message_id} role={self.role}>"

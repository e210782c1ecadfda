""" Chatbot Feedback Model: append-only ratings for messages or whole conversations... """

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow





class ChatbotFeedback(db.Model):
    # Table Name
    __tablename__ = "chatbot_feedback"

    # Columns
    feedback_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.Integer,
        db.ForeignKey("chatbot_conversations.conversation_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    message_id = db.Column(
        db.Integer,
        nullable = True
    )  # None = rating for the whole conversation

    rating = db.Column(
        db.Integer,
        nullable = False
    )

    comment = db.Column(
        TEXT,
        nullable = True
    )

    feedback_type = db.Column(
        db.String(50),
        nullable = True
    )  # helpful / not_helpful / overall ...

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utcnow
    )



    def __repr__(self):
        return f"<ChatbotFeedback {self.feedback_id} rating={self.rating}>"

""" Chatbot Fallbacks Model: generic answers used when no pattern matches... """

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db





class ChatbotFallback(db.Model):
    # Table Name
    __tablename__ = "chatbot_fallbacks"

    # Columns
    fallback_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    response = db.Column(
        TEXT,
        nullable = False
    )



    def __repr__(self):
        return f"<ChatbotFallback {self.fallback_id}>"

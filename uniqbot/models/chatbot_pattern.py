""" Chatbot Patterns Model: curated trigger phrases mapped to a canned answer... """

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow





class ChatbotPattern(db.Model):
    # Table Name
    __tablename__ = "chatbot_patterns"

    # Columns
    pattern_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    priority = db.Column(
        db.Integer,
        nullable = False,
        default = 0,
        index = True
    )  # ascending: 0 wins ties over 1

    response = db.Column(
        TEXT,
        nullable = False
    )

    is_active = db.Column(
        db.Boolean,
        nullable = False,
        default = True
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utcnow
    )

    triggers = db.relationship(
        "ChatbotTrigger",
        backref = "pattern",
        order_by = "ChatbotTrigger.trigger_id",
        cascade = "all, delete-orphan",
        lazy = "selectin"
    )



    def __repr__(self):
        return f"<ChatbotPattern {self.pattern_id} priority={self.priority}>"





class ChatbotTrigger(db.Model):
    # Table Name
    __tablename__ = "chatbot_triggers"

    # Columns
    trigger_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    pattern_id = db.Column(
        db.Integer,
        db.ForeignKey("chatbot_patterns.pattern_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    phrase = db.Column(
        db.String(500),
        nullable = False
    )



    def __repr__(self):
        return f"<ChatbotTrigger {self.trigger_id} '{self.phrase}'>"

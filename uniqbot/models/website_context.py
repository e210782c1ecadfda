""" Website Context Model: storefront page excerpts injected into AI prompts... """

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow





class WebsiteContext(db.Model):
    # Table Name
    __tablename__ = "website_context"

    # Columns
    context_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    page = db.Column(
        db.String(500),
        nullable = False
    )

    title = db.Column(
        db.String(255),
        nullable = False
    )

    content = db.Column(
        TEXT,
        nullable = False
    )

    category = db.Column(
        db.String(100),
        nullable = False,
        index = True
    )  # matches a conversation topic, e.g. "shipping"

    keywords = db.Column(
        db.JSON,
        nullable = False,
        default = list
    )

    is_active = db.Column(
        db.Boolean,
        nullable = False,
        default = True
    )

    last_updated = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utcnow,
        onupdate = utcnow
    )



    def __repr__(self):
        return f"<WebsiteContext {self.context_id} {self.category}>"

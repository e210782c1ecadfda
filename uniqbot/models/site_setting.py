""" Site Settings Model: flat key/value store; chatbot keys are prefixed "chatbot_"... """

# Database
from ..config.database import db





class SiteSetting(db.Model):
    # Table Name
    __tablename__ = "site_settings"

    # Columns
    setting_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    key = db.Column(
        db.String(255),
        nullable = False,
        unique = True
    )

    value = db.Column(
        db.Text,
        nullable = False,
        default = ""
    )  # always a string: "true", "0.7", "gpt-4o-mini" ...



    def __repr__(self):
        return f"<SiteSetting {self.key}>"

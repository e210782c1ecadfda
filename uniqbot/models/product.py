"""
Model: Product
Table: products

Read-only view of the storefront catalog used by the product-search
collaborator. Prices are stored in USD; tags is a comma-separated string
("women,summer,casual").
"""

# Python Packages
from sqlalchemy.dialects.postgresql import TEXT

# Database
from ..config.database import db

# Utils
from ..util.clock import utcnow


class Product(db.Model):
    """A published storefront product."""

    __tablename__ = "products"

    product_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    name = db.Column(db.String(255), nullable=False)

    slug = db.Column(db.String(255), nullable=False, unique=True)

    description = db.Column(TEXT, nullable=True)

    category = db.Column(db.String(100), nullable=True, index=True)

    price = db.Column(db.Float, nullable=False)

    compare_at_price = db.Column(db.Float, nullable=True)

    image_url = db.Column(db.String(500), nullable=True)

    tags = db.Column(db.String(500), nullable=True)

    rating = db.Column(db.Float, nullable=True)

    review_count = db.Column(db.Integer, nullable=False, default=0)

    is_published = db.Column(db.Boolean, nullable=False, default=True)

    is_featured = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Product {self.slug}>"

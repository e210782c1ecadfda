"""
Service: ProductCatalogService

The product-search collaborator behind the chat engine's shopping answers.

Flow:
  1. extract_criteria() reads a free-text query into category / gender /
     price range / keywords using the CATALOG_* vocabularies.
  2. search() queries published products (featured first, newest next).
  3. When nothing matches, a relaxed fallback chain runs:
       similar category → gender tag → featured → most recent
     and a message explaining the substitution is returned with it.

Database errors are rolled back and re-raised; the caller decides how to
degrade.
"""

# Python Packages
import logging
import re
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import List, Optional, Tuple

from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.product import Product

# Config
from ..config import bot_config, keywords, prompts

# Schemas
from ..schemas import ProductCard, ProductSearchResult


logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]")

# (min, max) in USD; None = open bound
PRICE_RANGES = {
    "budget":    (None, 30),
    "mid-range": (30, 100),
    "luxury":    (100, None),
}


@dataclass
class SearchCriteria:
    category: Optional[str] = None
    gender: Optional[str] = None
    price_range: Optional[str] = None
    keywords: List[str] = field(default_factory=list)


class ProductCatalogService:

    # ── Public ─────────────────────────────────────────────────────────────────

    def search(
        self,
        query: str,
        max_results: int,
        fuzzy_tolerance: float = bot_config.DEFAULT_CHATBOT_SETTINGS["fuzzy_search_tolerance"]
    ) -> ProductSearchResult:
        """
        Search the catalog for *query*.

        Args:
            query:           Raw user message.
            max_results:     Maximum number of products returned.
            fuzzy_tolerance: Similarity ratio (0-1) a category name needs to
                             count as "similar" during the fallback search.

        Returns:
            ProductSearchResult; fallback_products is only filled when
            products is empty.
        """
        criteria = self.extract_criteria(query)
        logger.debug("🔎 Catalog criteria for '%s': %s", query, criteria)

        try:
            rows = self._search_products(criteria, max_results)
            fallback_rows, fallback_message = [], None
            if not rows:
                fallback_rows, fallback_message = self._fallback_products(
                    criteria, max_results, fuzzy_tolerance
                )

        except Exception:
            db.session.rollback()
            raise

        products = [self.to_card(row) for row in rows]
        return ProductSearchResult(
            products               = products,
            fallback_products      = [self.to_card(row) for row in fallback_rows],
            fallback_message       = fallback_message,
            recommendation_message = prompts.CATALOG_RECOMMENDATION.format(count=len(products)),
        )

    @staticmethod
    def extract_criteria(query: str) -> SearchCriteria:
        lowered = (query or "").lower()
        words = _NON_WORD.sub(" ", lowered).split()
        tokens = set(words)
        criteria = SearchCriteria()

        for terms, gender in keywords.CATALOG_RECIPIENT_GENDER:
            if any(term in lowered for term in terms):
                criteria.gender = gender
                break

        for category, terms in keywords.CATALOG_CATEGORY_TERMS.items():
            if any(term in lowered for term in terms):
                criteria.category = category
                break

        if criteria.gender is None:
            for gender, terms in keywords.CATALOG_GENDER_TERMS.items():
                if tokens.intersection(terms):
                    criteria.gender = gender
                    break

        for price_range, terms in keywords.CATALOG_PRICE_TERMS.items():
            if any(term in lowered for term in terms):
                criteria.price_range = price_range
                break

        criteria.keywords = [
            word for word in words
            if len(word) > keywords.KEYWORD_MIN_LENGTH
            and word not in keywords.STOP_WORDS
            and word not in keywords.CATALOG_STOP_WORDS
        ]
        return criteria

    @staticmethod
    def to_card(product: Product) -> ProductCard:
        return ProductCard(
            name             = product.name,
            slug             = product.slug,
            category         = product.category or "",
            price            = product.price,
            image            = product.image_url or prompts.PRODUCT_PLACEHOLDER_IMAGE,
            compare_at_price = product.compare_at_price,
            rating           = round(product.rating, 1) if product.rating else 0,
            review_count     = product.review_count or 0,
        )

    # ── Private ────────────────────────────────────────────────────────────────

    @staticmethod
    def _published():
        return Product.query.filter(Product.is_published.is_(True))

    @staticmethod
    def _ordered(query, max_results: int):
        return (
            query
            .order_by(Product.is_featured.desc(), Product.created_at.desc())
            .limit(max_results)
            .all()
        )

    def _search_products(self, criteria: SearchCriteria, max_results: int) -> List[Product]:
        query = self._published()

        if criteria.category and self._published().filter(
            Product.category.ilike(f"%{criteria.category}%")
        ).first():
            query = query.filter(Product.category.ilike(f"%{criteria.category}%"))

        conditions = []
        for term in criteria.keywords:
            conditions.extend([
                Product.name.ilike(f"%{term}%"),
                Product.description.ilike(f"%{term}%"),
                Product.tags.ilike(f"%{term}%"),
            ])
        if criteria.keywords:
            combined = " ".join(criteria.keywords)
            conditions.extend([
                Product.name.ilike(f"%{combined}%"),
                Product.description.ilike(f"%{combined}%"),
            ])
        if criteria.gender and criteria.gender != "unisex":
            conditions.append(Product.tags.ilike(f"%{criteria.gender}%"))

        if conditions:
            query = query.filter(or_(*conditions))

        low, high = PRICE_RANGES.get(criteria.price_range, (None, None))
        if low is not None:
            query = query.filter(Product.price >= low)
        if high is not None:
            query = query.filter(Product.price <= high)

        return self._ordered(query, max_results)

    def _fallback_products(
        self,
        criteria: SearchCriteria,
        max_results: int,
        fuzzy_tolerance: float
    ) -> Tuple[List[Product], str]:
        products: List[Product] = []

        if criteria.category:
            similar = self._similar_categories(criteria.category, fuzzy_tolerance)
            if similar:
                products = self._ordered(
                    self._published().filter(Product.category.in_(similar)), max_results
                )

        if not products and criteria.gender:
            pattern = f"%{criteria.gender}%"
            products = self._ordered(
                self._published().filter(or_(
                    Product.tags.ilike(pattern),
                    Product.name.ilike(pattern),
                    Product.description.ilike(pattern),
                )),
                max_results
            )

        if not products:
            products = (
                self._published()
                .filter(Product.is_featured.is_(True))
                .order_by(Product.created_at.desc())
                .limit(max_results)
                .all()
            )

        if not products:
            products = (
                self._published()
                .order_by(Product.created_at.desc())
                .limit(max_results)
                .all()
            )

        logger.info("🔁 Catalog fallback returned %d products", len(products))

        message = prompts.PRODUCT_SEARCH_DEFAULT_FALLBACK_MESSAGE
        if products and criteria.category:
            message = prompts.CATALOG_FALLBACK_CATEGORY.format(category=criteria.category)
        elif products and criteria.gender:
            message = prompts.CATALOG_FALLBACK_GENDER.format(gender=criteria.gender)
        elif products:
            message = prompts.CATALOG_FALLBACK_POPULAR

        return products, message

    def _similar_categories(self, category: str, fuzzy_tolerance: float) -> List[str]:
        """Catalog categories sharing a 3-letter prefix with *category* or close enough by ratio."""
        rows = db.session.query(Product.category).filter(Product.category.isnot(None)).distinct().all()
        prefix = category[:3]

        similar = []
        for (name,) in rows:
            lowered = name.lower()
            if not lowered:
                continue
            if (
                prefix in lowered
                or lowered[:3] in category
                or SequenceMatcher(None, lowered, category).ratio() >= fuzzy_tolerance
            ):
                similar.append(name)
        return similar

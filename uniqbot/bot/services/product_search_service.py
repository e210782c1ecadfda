"""
Service: ProductSearchAdapter

Detects shopping intent in a message and turns the product-search
collaborator's results into an HTML answer.

Intent score = Σ weight × (phrases of the group found in the message),
see keywords.PRODUCT_SEARCH_INTENT_GROUPS. Below PRODUCT_SEARCH_MIN_SCORE
the adapter is not triggered and returns confidence 0.

Answers, by what the collaborator returned:
  products           → product cards, min(0.75 + score/100, 0.95), "product_search"
  fallback products  → fallback cards + tips, 0.65, "product_search_fallback"
  nothing            → 3 sampled search tips, 0.6, "product_search_no_results"
"""

# Python Packages
import html
import logging
import random
from typing import List, Optional

# Config
from ..config import keywords, prompts, thresholds

# Schemas
from ..schemas import CandidateResponse, ChatbotSettings, ProductCard

# Constants
from ...base import constants

# Utils
from ...util import currency as currency_util


logger = logging.getLogger(__name__)


def intent_score(lower_message: str) -> int:
    """Weighted count of shopping phrases found in *lower_message*."""
    score = 0
    for phrases, weight in keywords.PRODUCT_SEARCH_INTENT_GROUPS:
        score += weight * sum(1 for phrase in phrases if phrase in lower_message)
    return score


def not_triggered() -> CandidateResponse:
    return CandidateResponse(content="", confidence=0.0)


class ProductSearchAdapter:

    def __init__(self, catalog, rng: Optional[random.Random] = None):
        """
        Args:
            catalog: Collaborator with search(query, max_results, fuzzy_tolerance).
            rng:     Random source for sampling search tips.
        """
        self.catalog = catalog
        self.rng = rng or random.Random()


    def search(
        self,
        message: str,
        settings: ChatbotSettings,
        currency: str = currency_util.DEFAULT_CURRENCY
    ) -> CandidateResponse:
        """ Return a product answer, or confidence 0 when not a shopping request... """

        if not settings.enable_product_search:
            return not_triggered()

        score = intent_score(message.lower())
        if score < thresholds.PRODUCT_SEARCH_MIN_SCORE:
            return not_triggered()

        limit = settings.product_search_limit

        try:
            result = self.catalog.search(
                message,
                limit,
                fuzzy_tolerance = settings.fuzzy_search_tolerance
            )
        except Exception as exc:
            logger.warning("⚠️  Product search unavailable: %s", exc)
            return not_triggered()

        if result.products:
            cards = self.render_cards(result.products[:limit], currency, settings.show_product_images)
            return CandidateResponse(
                content = prompts.PRODUCT_SEARCH_RESULTS.format(
                    recommendation = result.recommendation_message,
                    cards          = cards,
                ),
                confidence = min(
                    thresholds.PRODUCT_SEARCH_BASE_CONFIDENCE + score / 100,
                    thresholds.PRODUCT_SEARCH_MAX_CONFIDENCE
                ),
                pattern_matched = "product_search",
                suggestions     = list(keywords.PRODUCT_SEARCH_SUGGESTIONS),
            )

        if settings.fallback_products and result.fallback_products:
            cards = self.render_cards(result.fallback_products[:limit], currency, settings.show_product_images)
            return CandidateResponse(
                content = prompts.PRODUCT_SEARCH_FALLBACK_RESULTS.format(
                    fallback_message = result.fallback_message or prompts.PRODUCT_SEARCH_DEFAULT_FALLBACK_MESSAGE,
                    cards            = cards,
                    support_email    = constants.SUPPORT_EMAIL,
                ),
                confidence      = thresholds.PRODUCT_SEARCH_FALLBACK_CONFIDENCE,
                pattern_matched = "product_search_fallback",
                suggestions     = list(keywords.PRODUCT_SEARCH_FALLBACK_SUGGESTIONS),
            )

        tips = self.rng.sample(keywords.SEARCH_TIP_POOL, keywords.SEARCH_TIPS_SAMPLE_SIZE)
        return CandidateResponse(
            content = prompts.PRODUCT_SEARCH_NO_RESULTS.format(
                tips          = "\n".join(prompts.SEARCH_TIP_BULLET.format(tip=tip) for tip in tips),
                support_email = constants.SUPPORT_EMAIL,
            ),
            confidence      = thresholds.PRODUCT_SEARCH_NO_RESULTS_CONFIDENCE,
            pattern_matched = "product_search_no_results",
            suggestions     = list(keywords.PRODUCT_SEARCH_NO_RESULTS_SUGGESTIONS),
        )

    # ── Rendering ──────────────────────────────────────────────────────────────

    def render_cards(self, products: List[ProductCard], currency: str, show_images: bool) -> str:
        return "\n".join(self.render_card(product, currency, show_images) for product in products)

    @staticmethod
    def render_card(product: ProductCard, currency: str, show_images: bool) -> str:
        name = html.escape(product.name)

        image_section = ""
        if show_images:
            image_section = prompts.PRODUCT_CARD_IMAGE.format(
                image_url = html.escape(product.image or prompts.PRODUCT_PLACEHOLDER_IMAGE),
                name      = name,
            )

        original_price = ""
        if product.compare_at_price:
            original_price = prompts.PRODUCT_CARD_ORIGINAL_PRICE.format(
                price = currency_util.display_price(product.compare_at_price, currency)
            )

        rating_section = ""
        if product.rating and product.rating > 0:
            rating_section = prompts.PRODUCT_CARD_RATING.format(
                rating       = product.rating,
                review_count = product.review_count or 0,
            )

        return prompts.PRODUCT_CARD.format(
            image_section  = image_section,
            product_url    = prompts.PRODUCT_URL.format(slug=product.slug),
            name           = name,
            category       = html.escape(product.category or ""),
            original_price = original_price,
            price          = currency_util.display_price(product.price, currency),
            rating_section = rating_section,
        )

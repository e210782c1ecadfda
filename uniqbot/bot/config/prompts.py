"""
prompts.py: All LLM Prompts & Canned Response Text
====================================================
Every system prompt, prompt section string, and fixed customer-facing text
used across the chat engine lives in this file.

To improve bot behaviour, edit the text here.
No prompts should be hardcoded inside service files.

Sections
--------
1. AI Support System Prompt: system block for the AI responder
2. Prompt Section Fallbacks: text used when a prompt section is empty
3. Rule-Based Fallbacks: generic apology when nothing matches
4. Product Cards: HTML for product recommendations
5. Product Search Answers: wrappers around the product cards
"""


# ══════════════════════════════════════════════════════════════════════════════
# 1. AI Support System Prompt
# ══════════════════════════════════════════════════════════════════════════════
# Used by AIResponder.build_prompt(). Placeholders are filled per request.

COMPANY_INFO = """\
- Name: Uniqverse
- Email: support@uniqverse.com
- Phone: 1-800-555-1234
- Hours: Monday-Friday 9AM-6PM EST, Saturday 10AM-4PM EST\
"""

SUPPORT_SYSTEM_PROMPT = """\
You are an AI customer support assistant for {chatbot_name}, an e-commerce platform.

COMPANY INFO:
{company_info}

WEBSITE CONTEXT:
{website_context}

RECENT LEARNINGS:
{recent_learnings}

SIMILAR QUESTIONS ANSWERED:
{similar_questions}

CONVERSATION TOPICS: {topics}

IMPORTANT GUIDELINES:
1. Always use the most specific information from the website context
2. Be helpful, friendly, and professional
3. Keep responses concise but complete
4. Use the company information provided above
5. If you don't have specific information, say so and offer to connect them with support
6. Always offer to help with anything else at the end
7. Use markdown formatting for links: [text](url)
8. If the website context contains exact information for their question, use it verbatim
9. For product questions, always mention checking the product page for latest info
10. For order questions, suggest they check their account or contact support with order number

Respond naturally as if you're part of the {chatbot_name} support team.\
"""


# ══════════════════════════════════════════════════════════════════════════════
# 2. Prompt Section Fallbacks
# ══════════════════════════════════════════════════════════════════════════════

WEBSITE_CONTEXT_UNAVAILABLE = "Website context unavailable."

WEBSITE_CONTEXT_SNIPPET = "[{category}] {title}:\n{content}"

QA_PAIR = 'Q: "{question}"\nA: "{answer}"'


# ══════════════════════════════════════════════════════════════════════════════
# 3. Rule-Based Fallbacks
# ══════════════════════════════════════════════════════════════════════════════

NO_FALLBACK_RESPONSE = (
    "I'm not sure how to help with that. Could you please rephrase your question?"
)


# ══════════════════════════════════════════════════════════════════════════════
# 4. Product Cards
# ══════════════════════════════════════════════════════════════════════════════
# One card per product. {image_section}, {original_price} and {rating_section}
# are empty strings when not applicable.

PRODUCT_CARD = """\
<div style="display: flex; border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px; margin: 8px 0; background: #f9fafb;">
    {image_section}
    <div style="flex: 1;">
        <h4 style="margin: 0 0 4px 0; font-weight: bold; color: #1f2937;">
            <a href="{product_url}" style="color: #2563eb; text-decoration: none;">{name}</a>
        </h4>
        <p style="margin: 0 0 4px 0; color: #6b7280; font-size: 14px;">{category}</p>
        <p style="margin: 0; color: #059669; font-weight: bold;">
            {original_price}{price}
        </p>
        {rating_section}
    </div>
</div>\
"""

PRODUCT_CARD_IMAGE = (
    '<img src="{image_url}" alt="{name}" style="width: 80px; height: 80px; '
    'object-fit: cover; border-radius: 6px; margin-right: 12px;" />'
)

PRODUCT_CARD_ORIGINAL_PRICE = (
    '<span style="text-decoration: line-through; color: #888;">{price}</span> '
)

PRODUCT_CARD_RATING = (
    '<p style="margin: 2px 0 0 0; font-size: 12px; color: #f59e0b;">'
    '★ {rating} ({review_count} reviews)</p>'
)

PRODUCT_URL = "/products/{slug}"

PRODUCT_PLACEHOLDER_IMAGE = "/placeholder-product.jpg"


# ══════════════════════════════════════════════════════════════════════════════
# 5. Product Search Answers
# ══════════════════════════════════════════════════════════════════════════════

PRODUCT_SEARCH_RESULTS = """\
{recommendation}

Here are some great options I found:

{cards}

You can [browse all products](/shop) or [view specific categories](/shop) to see more options.\
"""

PRODUCT_SEARCH_DEFAULT_FALLBACK_MESSAGE = (
    "I couldn't find exact matches for your search, but here are some similar "
    "products you might like:"
)

PRODUCT_SEARCH_FALLBACK_RESULTS = """\
{fallback_message}

{cards}

\U0001F4A1 **Try these search tips:**
- Use different keywords (e.g., "shirt" instead of "top")
- Try broader categories (e.g., "clothing" instead of "formal wear")
- Search by occasion (e.g., "wedding", "casual", "work")

You can also [browse all products](/shop) or [contact our support team](mailto:{support_email}) for personalized recommendations!\
"""

PRODUCT_SEARCH_NO_RESULTS = """\
I'd love to help you find the perfect products! While I couldn't find matches for your specific search, here are some tips to help you find what you're looking for:

\U0001F50D **Search Tips:**
{tips}

\U0001F6CD️ **Quick Options:**
• [Browse all products](/shop) to see our full collection
• [View popular categories](/shop) like Clothing, Electronics, and Home & Garden
• [Check out our featured products](/shop) for trending items

Need personalized help? [Contact our support team](mailto:{support_email}) and we'll help you find exactly what you need!\
"""

SEARCH_TIP_BULLET = "• {tip}"

CATALOG_RECOMMENDATION = "I found {count} products that might work for you!"

CATALOG_FALLBACK_CATEGORY = (
    "I couldn't find products matching your exact search, but here are some "
    "{category}-related items:"
)

CATALOG_FALLBACK_GENDER = (
    "I couldn't find products matching your exact search, but here are some "
    "{gender} products:"
)

CATALOG_FALLBACK_POPULAR = (
    "I couldn't find exact matches, but here are some popular products you might like:"
)

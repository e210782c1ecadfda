"""
knowledge_base.py: Frozen In-Process Pattern & Fallback Table
==============================================================
Used whenever the chatbot_patterns / chatbot_fallbacks tables cannot be read,
and as the seed data for an empty database. List position is the priority
(index 0 = highest precedence).
"""

CHAT_PATTERNS = (
    (
        ("hello", "hi", "hey", "greetings"),
        "Hello! Welcome to Uniqverse support. How can I help you today?",
    ),
    (
        ("bye", "goodbye", "see you", "talk later"),
        "Thank you for chatting with us! Feel free to come back if you have more questions.",
    ),
    (
        ("thanks", "thank you", "thx"),
        "You're welcome! Is there anything else I can help you with?",
    ),
    (
        ("shipping", "deliver", "ship", "shipping time", "delivery time"),
        "We offer Standard Shipping (3-5 business days), Express Shipping (2-3 business days), "
        "and Next Day Delivery (next business day). Standard Shipping is free for orders over $50, "
        "otherwise $4.99. Express Shipping is $9.99 and Next Day Delivery is $19.99. We do ship "
        "internationally, which takes 7-14 business days depending on the location.",
    ),
    (
        ("return", "returns policy", "refund", "exchange"),
        "Our return policy allows you to return items within 30 days of delivery. Items must be "
        "unused, in their original packaging, and in the same condition you received them. Refunds "
        "are typically processed within 5-7 business days after we receive and inspect the returned item.",
    ),
    (
        ("payment", "pay", "payment method", "credit card"),
        "We accept major credit cards (Visa, MasterCard, American Express, Discover), PayPal, "
        "Apple Pay, and Google Pay. All transactions are secured with industry-standard encryption.",
    ),
    (
        ("track", "order status", "where is my order", "tracking"),
        "You can track your order by logging into your account and visiting the 'Orders' section. "
        "Alternatively, you can use the tracking number provided in your shipping confirmation email.",
    ),
    (
        ("cancel", "cancel order", "cancellation"),
        "Orders can be cancelled within 1 hour of placing if they haven't been processed yet. Please "
        "log into your account, go to your orders, and select the cancel option if it's available.",
    ),
    (
        ("account", "create account", "sign up", "register"),
        "To create an account, click on the 'Account' icon in the top navigation bar and select "
        "'Register'. Follow the prompts to provide your email, create a password, and complete your "
        "profile information.",
    ),
    (
        ("password", "forgot password", "reset password"),
        "You can reset your password through the login page by clicking the 'Forgot Password' link. "
        "You'll receive an email with instructions to create a new password.",
    ),
    (
        ("contact", "email", "phone", "support"),
        "You can contact our support team via email at support@uniqverse.com or by phone at "
        "1-800-555-1234. Our business hours are Monday - Friday: 9:00 AM - 6:00 PM EST, "
        "Saturday: 10:00 AM - 4:00 PM EST.",
    ),
    (
        ("international", "worldwide", "ship abroad", "global shipping"),
        "Yes, we ship to most countries worldwide. International shipping typically takes 7-14 "
        "business days depending on the destination. Shipping costs and delivery times vary by location.",
    ),
    (
        ("business hours", "hours", "when are you open", "operating hours"),
        "Our customer support team is available Monday - Friday: 9:00 AM - 6:00 PM EST, "
        "Saturday: 10:00 AM - 4:00 PM EST. We are closed on Sundays and major holidays.",
    ),
    (
        ("damaged", "broken", "defective", "wrong item", "wrong product"),
        "We're sorry to hear that. Please contact our support team at support@uniqverse.com within "
        "48 hours of receiving your order. Include your order number and photos of the "
        "damaged/incorrect item, and we'll help resolve the issue promptly.",
    ),
)

FALLBACK_RESPONSES = (
    "I'm not sure I understand. Could you rephrase your question?",
    "I don't have information on that specific topic. Would you like to contact our support team?",
    "I'm still learning and don't have an answer for that question. For detailed assistance, "
    "please email support@uniqverse.com or call 1-800-555-1234.",
    "I don't have enough information about that. Can you provide more details or ask a different question?",
    "That's a bit outside my knowledge area. You might find the answer in our Help Center or by "
    "contacting our support team.",
)

""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "FEEDBACK_RECORDED"         :   "Feedback recorded successfully.",
    "LEARNING_UPDATED"          :   "Learning entry updated successfully.",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"           :   "Request body is required",
    "MISSING_SESSION_ID"        :   "session_id is required.",
    "INVALID_USER_ID"           :   "user_id must be a non-empty string",

    # Turn Errors
    "MISSING_MESSAGES"          :   "Messages array is required",
    "INVALID_MESSAGE"           :   "Each message needs a role of 'user' or 'assistant' and non-empty content",
    "LAST_MESSAGE_NOT_USER"     :   "Last message must be from user",
    "UNSUPPORTED_CURRENCY"      :   "Unsupported currency: {}",

    # Feedback Errors
    "MISSING_CONVERSATION_ID"   :   "conversation_id and rating are required",
    "INVALID_RATING"            :   "rating must be an integer between 1 and 5",
    "CONVERSATION_NOT_FOUND"    :   "Conversation not found.",
    "MESSAGE_NOT_FOUND"         :   "Message not found in this conversation.",

    # Learning Errors
    "INVALID_LEARNING_STATUS"   :   "status must be one of: {}",
    "LEARNING_NOT_FOUND"        :   "Learning entry not found.",
    "INVALID_DAYS"              :   "days must be a positive integer",
    "INVALID_LEARNING_IDS"      :   "ids must be a non-empty list of learning entry ids",

    # Generic apology returned whenever a turn cannot be answered
    "TECHNICAL_DIFFICULTIES"    :   "I apologize, but I'm experiencing technical difficulties. "
                                    "Please try asking your question in a different way, "
                                    "or contact our support team for immediate assistance.",
}

"""
Shared text helpers for the chat engine.

Keyword extraction, topic classification and intent detection are used by
the context analyzer, the pattern matcher, the AI responder and the learning
queue. They all go through this module so every caller reads a message the
same way. All functions are pure.
"""

# Python Packages
import re
from typing import Iterable, List, Optional

# Config
from ..bot.config import keywords


_NON_WORD = re.compile(r"[^\w\s]")


def extract_keywords(text: str) -> List[str]:
    """
    Lowercase *text*, drop punctuation and return the words longer than
    two characters that are not stop words. Order and duplicates are kept.
    """
    if not text:
        return []

    clean = _NON_WORD.sub("", text.lower())
    return [
        word for word in clean.split()
        if len(word) > keywords.KEYWORD_MIN_LENGTH and word not in keywords.STOP_WORDS
    ]


def classify_topics(text: str) -> List[str]:
    """
    Return every topic whose keywords appear in *text* (substring match),
    or ["general"] when none do.
    """
    lowered = (text or "").lower()
    topics = [
        topic for topic, topic_keywords in keywords.TOPIC_KEYWORDS.items()
        if any(keyword in lowered for keyword in topic_keywords)
    ]
    return topics or [keywords.DEFAULT_TOPIC]


def detect_intent(text: str) -> Optional[str]:
    """First matching intent in priority order, or None."""
    lowered = (text or "").lower()
    for intent, signals in keywords.INTENT_SIGNALS:
        if any(signal in lowered for signal in signals):
            return intent
    return None


def truncate_at_sentence(text: str, limit: int, min_cut: int) -> str:
    """
    Shorten *text* to about *limit* characters.

    Cuts after the last ". " inside the first *limit* characters when that
    sentence end lies past *min_cut*; otherwise hard-cuts and appends "...".
    """
    if len(text) <= limit:
        return text

    truncated = text[:limit]
    last_sentence = truncated.rfind(". ")
    if last_sentence > min_cut:
        return truncated[:last_sentence + 1]
    return truncated + "..."


def generate_suggestions(topics: Iterable[str]) -> List[str]:
    """Follow-up suggestions for the given topics, at most MAX_SUGGESTIONS."""
    suggestions = []
    for topic in topics:
        suggestions.extend(keywords.SUGGESTIONS_BY_TOPIC.get(topic, []))
    return suggestions[:keywords.MAX_SUGGESTIONS]


_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_QUESTION_OPENER = re.compile(r"^(how|what|when|where|why|can|could|would|should)")

MAIN_PHRASE_MIN_WORDS = 2
MAIN_PHRASE_MAX_WORDS = 6
MAIN_PHRASE_MIN_LENGTH = 5
MAIN_PHRASE_LIMIT = 5


def extract_main_phrases(text: str) -> List[str]:
    """
    Candidate trigger phrases for a question: every run of 2 to 6 words
    inside a sentence that is longer than five characters and does not
    open with a question word. First five unique phrases, in order.
    """
    phrases = []
    for sentence in _SENTENCE_SPLIT.split(text or ""):
        words = sentence.strip().lower().split()
        for start in range(len(words) - 1):
            longest = min(MAIN_PHRASE_MAX_WORDS, len(words) - start)
            for length in range(MAIN_PHRASE_MIN_WORDS, longest + 1):
                phrase = " ".join(words[start:start + length])
                if len(phrase) > MAIN_PHRASE_MIN_LENGTH and not _QUESTION_OPENER.match(phrase):
                    if phrase not in phrases:
                        phrases.append(phrase)
    return phrases[:MAIN_PHRASE_LIMIT]

"""
bot/config/__init__.py
======================
Public surface of the bot configuration package.

Config files:
  bot_config: windows, limits and runtime settings defaults
  keywords: ALL keyword lists, topic/intent signals and search vocabulary
  thresholds: scoring weights, confidence constants and arbitration bands
  prompts: system prompt, product card HTML and canned answers
  knowledge_base: frozen pattern/fallback table used when the DB is unreachable
"""

from . import bot_config
from . import keywords
from . import thresholds
from . import prompts
from . import knowledge_base

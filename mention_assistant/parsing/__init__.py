"""
Parsing package.

Turns raw user text into assistant requests.
"""

from mention_assistant.parsing.mention_parser import MentionParser, ParsedMention
from mention_assistant.parsing.request_classifier import classify_request

__all__ = ["MentionParser", "ParsedMention", "classify_request"]

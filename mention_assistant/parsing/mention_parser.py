"""
Mention Parser.

Detects an assistant mention in user text and extracts the command after it.

Sandi Metz Principles:
- Single Responsibility: Mention detection
- Small methods: Each parsing step isolated
- Pure functions: Same text always yields the same result
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from mention_assistant.models.request import Intent
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)

EXPLAIN_KEYWORDS = ("explain", "content", "post about")

# Bare references to the surrounding post, e.g. "what is this?" or "about it"
POST_REFERENCE_PATTERN = re.compile(
    r"^(?:about|what is|what's)(?:\s+(?:this|that|it)\b.*)?[?.!]*$"
)

USER_MENTION_PATTERN = re.compile(r"(?<![\w@])@(\w+)")


@dataclass(frozen=True)
class ParsedMention:
    """Result of parsing text that mentions the assistant."""

    intent: Intent
    command: str
    surrounding: str = ""
    source: str = ""

    @property
    def question(self) -> Optional[str]:
        """Question payload in its original case."""
        if self.intent == Intent.QUESTION:
            return self.command
        return None


class MentionParser:
    """
    Parses assistant mentions out of free-form text.

    The mention is case-insensitive and must not be a prefix of a longer
    handle.
    """

    def __init__(self, handle: str = "eduhive"):
        """
        Initialize parser.

        Args:
            handle: Assistant handle without the leading @
        """
        self._handle = handle.lstrip("@").lower()
        self._pattern = re.compile(
            rf"(?<![\w@])@{re.escape(self._handle)}(?!\w)([^\r\n]*)",
            re.IGNORECASE,
        )

    @property
    def handle(self) -> str:
        """Assistant handle the parser looks for."""
        return self._handle

    def parse(self, text: str) -> Optional[ParsedMention]:
        """
        Parse the first assistant mention in text.

        Args:
            text: Free-form user text

        Returns:
            Parsed mention, or None when the assistant is not mentioned
        """
        if not text:
            return None

        match = self._pattern.search(text)
        if not match:
            return None

        command = self._clean_command(match.group(1))
        intent = Intent.QUESTION
        if self._is_explain_command(command.lower()):
            intent = Intent.EXPLAIN

        logger.debug("Mention parsed", intent=intent.value, length=len(command))
        return ParsedMention(
            intent=intent,
            command=command,
            surrounding=self._surrounding(text, match),
            source=text.strip(),
        )

    def extract_user_mentions(self, text: str) -> List[str]:
        """
        Extract mentioned usernames, excluding the assistant.

        Args:
            text: Free-form user text

        Returns:
            Distinct usernames in order of first appearance
        """
        usernames: List[str] = []
        seen = set()

        for username in USER_MENTION_PATTERN.findall(text or ""):
            key = username.lower()
            if key == self._handle or key in seen:
                continue
            seen.add(key)
            usernames.append(username)

        return usernames

    def _surrounding(self, text: str, match: "re.Match[str]") -> str:
        """Text of the post outside the mention line segment."""
        parts = [text[: match.start()].strip(), text[match.end() :].strip()]
        return "\n".join(part for part in parts if part)

    def _clean_command(self, raw: str) -> str:
        """Strip separators between the handle and the command."""
        return raw.strip().lstrip(":,").strip()

    def _is_explain_command(self, command: str) -> bool:
        """Check if command asks about the surrounding post."""
        if not command:
            return True

        if any(keyword in command for keyword in EXPLAIN_KEYWORDS):
            return True

        return bool(POST_REFERENCE_PATTERN.match(command))

"""
Request Classifier.

Folds a parsed mention together with caller-supplied content and
attachments into the final assistant request.

Sandi Metz Principles:
- Single Responsibility: Intent resolution
- Small functions: One decision per branch
- Pure functions: No side effects
"""

from typing import Optional, Sequence

from mention_assistant.models.request import AssistantRequest, Attachment, Intent
from mention_assistant.parsing.mention_parser import ParsedMention

ATTACHED_CONTENT_PLACEHOLDER = "(the attached content)"


def _clean(text: Optional[str]) -> str:
    return (text or "").strip()


def _post_text(parsed: Optional[ParsedMention]) -> str:
    """Post body taken from the mention text itself."""
    if parsed is None:
        return ""
    if parsed.surrounding:
        return parsed.surrounding
    # An explain command with nothing around it is explained as written
    if parsed.intent == Intent.EXPLAIN and parsed.command:
        return parsed.source
    return ""


def classify_request(
    parsed: Optional[ParsedMention],
    content: Optional[str] = None,
    attachments: Optional[Sequence[Attachment]] = None,
    context: Optional[str] = None,
) -> AssistantRequest:
    """
    Resolve the intent of a mention and build the request.

    Args:
        parsed: Parsed mention (None is treated as a bare mention)
        content: Body of the post the mention refers to (defaults to the
            text around the mention)
        attachments: Post attachments in display order
        context: Extra context supplied by the caller

    Returns:
        Assistant request ready for prompt building
    """
    attachments = list(attachments or [])
    content = _clean(content) or _post_text(parsed)
    context = _clean(context)

    if parsed is not None and parsed.intent == Intent.QUESTION and parsed.command:
        return AssistantRequest(
            intent=Intent.QUESTION,
            primary_content=parsed.command,
            auxiliary_context=context or content or None,
            attachments=attachments,
        )

    if content or attachments:
        return AssistantRequest(
            intent=Intent.EXPLAIN,
            primary_content=content or ATTACHED_CONTENT_PLACEHOLDER,
            auxiliary_context=context or None,
            attachments=attachments,
        )

    return AssistantRequest(intent=Intent.UNSPECIFIED)

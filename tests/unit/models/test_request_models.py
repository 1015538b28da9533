"""Test request, prompt and cache entry models."""

import pytest
from pydantic import ValidationError

from mention_assistant.models.cache_entry import CacheEntry
from mention_assistant.models.prompt import ChatPrompt, ChatTurn, PromptSpec
from mention_assistant.models.query import ChatQuery
from mention_assistant.models.request import AssistantRequest, Attachment, Intent


class TestAssistantRequest:
    """Test assistant request validation."""

    @pytest.mark.parametrize("intent", [Intent.EXPLAIN, Intent.QUESTION])
    def test_should_require_content(self, intent):
        """Test explain and question need primary content."""
        with pytest.raises(ValidationError):
            AssistantRequest(intent=intent, primary_content="   ")

    def test_should_allow_unspecified_without_content(self):
        """Test greeting request needs nothing."""
        request = AssistantRequest(intent=Intent.UNSPECIFIED)

        assert request.primary_content == ""
        assert request.is_cacheable is False

    def test_should_keep_image_order(self, image_attachments, document_attachment):
        """Test image filter preserves order."""
        request = AssistantRequest(
            intent=Intent.EXPLAIN,
            primary_content="post",
            attachments=[image_attachments[0], document_attachment, image_attachments[1]],
        )

        assert request.has_images is True
        assert [a.url for a in request.image_attachments] == [
            "https://cdn.example.com/a.png",
            "https://cdn.example.com/b.jpg",
        ]


class TestAttachment:
    """Test attachment helpers."""

    def test_should_detect_images(self, document_attachment):
        """Test media type check."""
        assert Attachment(url="x.png", media_type="IMAGE/PNG").is_image is True
        assert document_attachment.is_image is False

    def test_should_default_media_type(self):
        """Test unknown media type."""
        assert Attachment(url="blob").is_image is False


class TestCacheEntry:
    """Test cache entry expiry."""

    def test_should_expire_only_after_ttl(self):
        """Test age comparison is strict."""
        entry = CacheEntry(key="k", value="v", created_at=100.0)

        assert entry.age_seconds(130.0) == 30.0
        assert entry.is_expired(160.0, 60) is False
        assert entry.is_expired(160.5, 60) is True


class TestPrompts:
    """Test prompt message construction."""

    def test_prompt_spec_should_have_two_turns(self):
        """Test text prompt messages."""
        prompt = PromptSpec(system_role="sys", user_role="hi", max_tokens=10)

        assert prompt.to_messages() == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ]

    def test_chat_prompt_should_follow_turn_order(self):
        """Test chat prompt messages."""
        prompt = ChatPrompt(
            system_role="sys",
            turns=[
                ChatTurn(role="user", content="a"),
                ChatTurn(role="assistant", content="b"),
                ChatTurn(role="user", content="c"),
            ],
            max_tokens=10,
        )

        assert [m["role"] for m in prompt.to_messages()] == [
            "system",
            "user",
            "assistant",
            "user",
        ]

    def test_chat_turn_should_reject_unknown_role(self):
        """Test role validation."""
        with pytest.raises(ValidationError):
            ChatTurn(role="system", content="x")


class TestChatQuery:
    """Test chat query validation."""

    def test_should_strip_message(self):
        """Test message normalization."""
        assert ChatQuery(message="  hello  ").message == "hello"

    def test_should_reject_blank_message(self):
        """Test whitespace-only message."""
        with pytest.raises(ValidationError):
            ChatQuery(message="   ")

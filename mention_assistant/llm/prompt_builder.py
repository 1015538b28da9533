"""
Prompt builder.

Sandi Metz Principles:
- Single Responsibility: Turn assistant requests into model prompts
- Small methods: One template per method
- Pure functions: No network or cache access
"""

from typing import List, Optional, Sequence

from mention_assistant.config import AppConfig, config
from mention_assistant.models.prompt import ChatPrompt, ChatTurn, PromptSpec, VisionPrompt
from mention_assistant.models.request import AssistantRequest, Intent

PLAIN_TEXT_RULE = (
    "Write plain text only. Do not use Markdown or any other markup: "
    "no headings, asterisks, bullet symbols, tables or code fences."
)

TONES = {
    "concise": "Be friendly and concise. Keep the answer to a few short paragraphs.",
    "thorough": (
        "Be enthusiastic and thorough. Break complex ideas into understandable "
        "parts, give examples when helpful and suggest a follow-up question."
    ),
}

EXPLAIN_SYSTEM = (
    "You are {name}, a helpful AI tutor for educational content. "
    "Your role is to analyze educational posts and explain them in a clear, "
    "student-friendly way, adding context where it helps. {tone} {plain} "
    'Always start your response with "🤖 Hi! I\'m {name}." and end with an '
    "encouraging message about learning."
)

QUESTION_SYSTEM = (
    "You are {name}, a helpful AI tutor. Your role is to answer student "
    "questions clearly and encourage further learning and curiosity. "
    "{tone} {plain} "
    'Always start your response with "🤖 Hi! I\'m {name}." and end with an '
    "encouraging message."
)

UNSPECIFIED_SYSTEM = (
    "You are {name}, a friendly AI tutor for students. Help them with their "
    "educational needs and encourage learning. {plain}"
)

UNSPECIFIED_USER = (
    "A student has mentioned me but didn't specify what they need. Please "
    "introduce yourself and ask how you can help with their studies."
)

QUICK_CHAT_SYSTEM = (
    "You are {name}, the study assistant for the student community platform. "
    "You help students with assignments, homework, academic questions and "
    "study-related queries. Give concise, helpful answers and keep responses "
    "brief since this is a quick chat. Remember our conversation context. {plain}"
)

PAGE_CHAT_SYSTEM = (
    "You are {name}, the study assistant for the student community platform. "
    "You help students with assignments, homework and academic questions, and "
    "you are particularly good at explaining concepts clearly and solving math "
    "problems step by step, showing your work. Be helpful and educational. {plain}"
)

VISION_INSTRUCTION = (
    "Please also analyze the attached content and incorporate it into your "
    "explanation."
)


class PromptBuilder:
    """
    Builds role-tagged prompts for each intent and chat surface.

    Persona verbosity and output budgets come from configuration.
    """

    def __init__(self, settings: Optional[AppConfig] = None):
        """
        Initialize prompt builder.

        Args:
            settings: Configuration (uses global config if None)
        """
        self._settings = settings or config

    @property
    def persona(self) -> str:
        """Configured persona verbosity."""
        return self._settings.persona

    def build(self, request: AssistantRequest) -> PromptSpec:
        """
        Build the text-only prompt for a request.

        Args:
            request: Assistant request

        Returns:
            Prompt with system and user turns
        """
        if request.intent == Intent.EXPLAIN:
            return self._build_explain(request)
        if request.intent == Intent.QUESTION:
            return self._build_question(request)
        return self._build_unspecified()

    def build_vision(self, request: AssistantRequest) -> Optional[VisionPrompt]:
        """
        Build the multimodal prompt when the request carries images.

        Args:
            request: Assistant request

        Returns:
            Vision prompt, or None when there is nothing to look at
        """
        if request.intent == Intent.UNSPECIFIED or not request.has_images:
            return None

        text_prompt = self.build(request)
        return VisionPrompt(
            system_role=text_prompt.system_role,
            text=f"{text_prompt.user_role}\n\n{VISION_INSTRUCTION}",
            image_urls=[attachment.url for attachment in request.image_attachments],
            max_tokens=self._budget(self._settings.explain_max_tokens),
        )

    def build_chat(
        self, message: str, history: Sequence[ChatTurn] = (), surface: str = "page"
    ) -> ChatPrompt:
        """
        Build a conversational prompt for a chat surface.

        Args:
            message: New user message
            history: Earlier turns, oldest first
            surface: "quick" for the chat modal, "page" for the assistant page

        Returns:
            Chat prompt with the most recent history turns
        """
        if surface == "quick":
            template = QUICK_CHAT_SYSTEM
            window = self._settings.quick_chat_history
            max_tokens = self._settings.quick_chat_max_tokens
        else:
            template = PAGE_CHAT_SYSTEM
            window = self._settings.page_chat_history
            max_tokens = self._settings.page_chat_max_tokens

        recent: List[ChatTurn] = list(history)[-window:] if window else []
        turns = recent + [ChatTurn(role="user", content=message)]

        return ChatPrompt(
            system_role=self._system(template),
            turns=turns,
            max_tokens=max_tokens,
        )

    def _build_explain(self, request: AssistantRequest) -> PromptSpec:
        user = (
            "Please explain this educational post content in detail:\n\n"
            f'"{request.primary_content}"'
        )
        if request.auxiliary_context:
            user += f"\n\nContext: {request.auxiliary_context}"
        if request.attachments:
            user += (
                f"\n\nThis post also includes {len(request.attachments)} "
                "attachment(s). Please analyze the content as a whole and "
                "reference it in your explanation."
            )

        return PromptSpec(
            system_role=self._system(EXPLAIN_SYSTEM),
            user_role=user,
            max_tokens=self._budget(self._settings.explain_max_tokens),
        )

    def _build_question(self, request: AssistantRequest) -> PromptSpec:
        user = f'A student is asking: "{request.primary_content}"'
        if request.auxiliary_context:
            user += f"\n\nContext: {request.auxiliary_context}"
        if request.attachments:
            user += "\n\nThe post they are asking about also includes attached content."
        user += "\n\nPlease provide a helpful, educational response."

        return PromptSpec(
            system_role=self._system(QUESTION_SYSTEM),
            user_role=user,
            max_tokens=self._budget(self._settings.question_max_tokens),
        )

    def _build_unspecified(self) -> PromptSpec:
        return PromptSpec(
            system_role=self._system(UNSPECIFIED_SYSTEM),
            user_role=UNSPECIFIED_USER,
            max_tokens=self._budget(self._settings.question_max_tokens),
        )

    def _system(self, template: str) -> str:
        return template.format(
            name=self._settings.assistant_name,
            tone=TONES[self.persona],
            plain=PLAIN_TEXT_RULE,
        )

    def _budget(self, max_tokens: int) -> int:
        """Concise persona gets half the output budget."""
        if self.persona == "concise":
            return max(1, max_tokens // 2)
        return max_tokens

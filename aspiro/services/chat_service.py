"""
Career chat service.
"""
from typing import Optional

from aspiro.core.llm import CompletionError, TextCompletionProvider
from aspiro.core.logging import get_logger
from aspiro.schemas.chat import ChatResponse

logger = get_logger(__name__)

CHAT_SYSTEM_PROMPT = (
    "You are ASPIRO AI, a career guidance assistant. Respond to the user's question "
    "about career development, skills, job search, or professional growth. Provide a "
    "helpful, encouraging, and actionable response. Keep it conversational but "
    "professional."
)

FALLBACK_REPLY = (
    "I'm sorry, I'm having trouble connecting to my AI service right now. Please try "
    "again later, or feel free to ask me about career guidance and I'll do my best to "
    "help with the information I have available."
)


class ChatService:
    async def reply(
        self,
        provider: TextCompletionProvider,
        *,
        message: str,
        context: Optional[str] = None,
    ) -> ChatResponse:
        prompt = f"User message: {message}"
        if context:
            prompt += f"\nContext: {context}"

        try:
            text = await provider.complete(prompt, system=CHAT_SYSTEM_PROMPT)
        except CompletionError as exc:
            logger.warning(
                "chat_model_failed",
                provider=provider.name,
                reason=str(exc),
                fallback="apology",
            )
            return ChatResponse(reply=FALLBACK_REPLY)

        return ChatResponse(reply=text.strip())

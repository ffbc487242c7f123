# teamdesk/ai_chat/client.py
"""
Thin wrapper around an OpenAI-compatible chat completion endpoint
(Groq by default) for the HR assistant widget.
"""
import json
import logging
from functools import lru_cache
from typing import Any, List, Optional

from openai import OpenAI

from teamdesk import config
from teamdesk.errors import UpstreamError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful HR assistant for a project management tool. You help users understand "
    "their projects, tasks, and provide guidance on project management best practices."
)


def build_prompt(message: str, projects: Optional[List[Any]], tasks: Optional[List[Any]]) -> str:
    return (
        "You are an HR assistant for a project management tool. Here is the current context:\n\n"
        f"Projects: {json.dumps(projects or [], indent=2, default=str)}\n"
        f"Tasks: {json.dumps(tasks or [], indent=2, default=str)}\n\n"
        f"User question: {message}\n\n"
        "Please provide a helpful and concise response as an HR assistant. "
        "Focus on being informative and professional."
    )


class ChatAssistant:
    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or config.AI_CHAT_API_KEY
        self.base_url = base_url or config.AI_CHAT_BASE_URL
        self.model = model or config.AI_CHAT_MODEL
        self._client = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise UpstreamError("AI chat API key is not configured")
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    def reply(self, message: str, projects=None, tasks=None) -> str:
        prompt = build_prompt(message, projects, tasks)
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
                max_tokens=1024,
                top_p=1,
                stream=False,
            )
        except UpstreamError:
            raise
        except Exception as e:
            logger.error("Chat completion error: %s", e)
            raise UpstreamError(f"Chat completion failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise UpstreamError("No response from AI model")
        return content.strip()


@lru_cache(maxsize=1)
def get_chat_assistant() -> ChatAssistant:
    return ChatAssistant()

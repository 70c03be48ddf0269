"""Second brain: saved links and notes, answered over with an LLM."""

from .ask import ask_question
from .llm import LLMError, check_health, generate
from .prompt import ValidationError, build_prompt

__all__ = ["LLMError", "ValidationError", "ask_question", "build_prompt", "check_health", "generate"]

"""LLM API client for answering questions."""

from openai import OpenAI
from openai.types.chat import ChatCompletionUserMessageParam

from common.display import console
from .config import get_llm_config

ANSWER_MAX_TOKENS = 1000
HEALTH_MAX_TOKENS = 10
HEALTH_PROMPT = "Hello"
REQUEST_TIMEOUT = 30.0
NO_ANSWER_PLACEHOLDER = "No answer generated"


class LLMError(Exception):
    """Raised when the LLM request fails (network, auth, quota)."""
    pass


def get_client() -> tuple[OpenAI, str]:
    """Build an OpenAI client from environment config.

    Returns:
        Tuple of (client, model)
    """
    config = get_llm_config()
    client_kwargs = {"api_key": config.api_key, "timeout": REQUEST_TIMEOUT, "max_retries": 0}
    if config.base_url:
        client_kwargs["base_url"] = config.base_url
    return OpenAI(**client_kwargs), config.model


def call_chat_completions_api(client: OpenAI, model: str, user_prompt: str, max_tokens: int) -> str | None:
    """Call OpenAI Chat Completions API.

    Returns:
        First choice text, or None when the response carries no choice
    """
    message_user_prompt: ChatCompletionUserMessageParam = {"role": "user", "content": user_prompt}
    response = client.chat.completions.create(
        model=model,
        messages=[message_user_prompt],
        max_tokens=max_tokens,
    )
    if not response.choices:
        return None
    return response.choices[0].message.content


def generate(prompt: str, max_tokens: int = ANSWER_MAX_TOKENS, verbose: int = 0) -> str:
    """Send a prompt to the LLM and return the generated text.

    Uses OpenAI-compatible API. Configure via environment variables:
    - OPENAI_API_KEY: API key (required)
    - OPENAI_BASE_URL: Base URL (optional, for Groq/other providers)
    - OPENAI_MODEL: Model name (default: gpt-4o-mini)

    Raises:
        LLMError: On any client or API failure
    """
    try:
        client, model = get_client()
        if verbose >= 2:
            console.print(f"[dim]  LLM prompt ({model}): {len(prompt):,} chars[/dim]")
        response_text = call_chat_completions_api(client, model, prompt, max_tokens)
    except Exception as e:
        raise LLMError(f"AI request failed: {e}") from e

    if not response_text:
        return NO_ANSWER_PLACEHOLDER
    return response_text


def check_health() -> bool:
    """Send a trivial prompt; True when the LLM answers without error."""
    try:
        generate(HEALTH_PROMPT, max_tokens=HEALTH_MAX_TOKENS)
        return True
    except Exception:
        return False

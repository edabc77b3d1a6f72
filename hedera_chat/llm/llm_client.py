import os
from functools import lru_cache
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_groq import ChatGroq
from langchain_openai import ChatOpenAI

DEFAULT_PROVIDER = "openai"
DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "groq": "llama-3.1-8b-instant",
}
API_KEY_VARS = {
    "openai": "OPENAI_API_KEY",
    "groq": "GROQ_API_KEY",
}


def default_model_for(provider: str) -> str:
    try:
        return DEFAULT_MODELS[provider.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported LLM provider: {provider}. Expected one of {sorted(DEFAULT_MODELS)}."
        ) from None


@lru_cache(maxsize=4)
def get_chat_llm(
    provider: str = DEFAULT_PROVIDER,
    model_name: Optional[str] = None,
    temperature: float = 0.0,
) -> BaseChatModel:
    """
    Return a cached chat model instance for the given provider.

    Args:
        provider: ``openai`` or ``groq``.
        model_name: Model identifier; falls back to the provider default.
        temperature: Sampling temperature for the response.
    """
    provider = provider.lower()
    model_name = model_name or default_model_for(provider)
    if provider not in API_KEY_VARS:
        raise ValueError(
            f"Unsupported LLM provider: {provider}. Expected one of {sorted(API_KEY_VARS)}."
        )

    key_var = API_KEY_VARS[provider]
    api_key = os.getenv(key_var)
    if not api_key:
        raise RuntimeError(
            f"{key_var} is not set. Export the key or add it to your environment."
        )

    if provider == "groq":
        return ChatGroq(
            groq_api_key=api_key,
            model_name=model_name,
            temperature=temperature,
        )
    return ChatOpenAI(
        api_key=api_key,
        model=model_name,
        temperature=temperature,
    )

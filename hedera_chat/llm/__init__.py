"""LLM integration utilities."""

from .llm_client import get_chat_llm
from .memory import build_memory
from .prompts import pull_prompt

__all__ = ["build_memory", "get_chat_llm", "pull_prompt"]

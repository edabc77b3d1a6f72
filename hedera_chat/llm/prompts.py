import logging

from langchain import hub
from langchain_core.prompts import ChatPromptTemplate

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_REF = "hwchase17/structured-chat-agent"


def pull_prompt(prompt_ref: str = DEFAULT_PROMPT_REF) -> ChatPromptTemplate:
    """Fetch a prompt template from the LangChain hub by reference."""
    logger.info("Pulling prompt template '%s' from the hub", prompt_ref)
    prompt = hub.pull(prompt_ref)
    if not isinstance(prompt, ChatPromptTemplate):
        raise TypeError(
            f"Hub prompt '{prompt_ref}' is a {type(prompt).__name__}, expected a ChatPromptTemplate."
        )
    return prompt

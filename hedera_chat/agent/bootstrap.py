import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from langchain.agents import AgentExecutor, create_structured_chat_agent

from hedera_chat.hedera import (
    AgentMode,
    Configuration,
    Context,
    HederaLangchainToolkit,
    build_hedera_client,
    load_credentials,
)
from hedera_chat.llm import build_memory, get_chat_llm, pull_prompt

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> List[str]:
    value = os.getenv(name) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class ChatbotConfig:
    llm_provider: str = field(default_factory=lambda: os.getenv("LLM_PROVIDER", "openai"))
    model_name: Optional[str] = field(default_factory=lambda: os.getenv("LLM_MODEL_NAME") or None)
    temperature: float = field(default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0")))
    network: str = field(default_factory=lambda: os.getenv("HEDERA_NETWORK", "testnet"))
    key_type: str = field(default_factory=lambda: os.getenv("HEDERA_KEY_TYPE", "ecdsa"))
    prompt_ref: str = field(
        default_factory=lambda: os.getenv("AGENT_PROMPT_REF", "hwchase17/structured-chat-agent")
    )
    tools: List[str] = field(default_factory=lambda: _env_list("AGENT_TOOLS"))
    verbose: bool = field(default_factory=lambda: _env_flag("AGENT_VERBOSE", False))
    handle_parsing_errors: bool = field(
        default_factory=lambda: _env_flag("AGENT_HANDLE_PARSING_ERRORS", True)
    )


def bootstrap(config: Optional[ChatbotConfig] = None) -> AgentExecutor:
    """
    Build the agent executor the REPL talks to.

    Stages run strictly in order and each consumes the previous stage's
    output; any exception propagates and nothing after it runs. The
    caller loads ``.env`` first so ``LOG_LEVEL`` is known before logging
    is configured.
    """
    config = config or ChatbotConfig()
    credentials = load_credentials()

    llm = get_chat_llm(
        provider=config.llm_provider,
        model_name=config.model_name,
        temperature=config.temperature,
    )
    logger.info("Language model ready (%s)", config.llm_provider)

    client = build_hedera_client(credentials, network=config.network, key_type=config.key_type)

    toolkit = HederaLangchainToolkit(
        client=client,
        configuration=Configuration(
            tools=list(config.tools),
            context=Context(mode=AgentMode.AUTONOMOUS, account_id=credentials.account_id),
        ),
    )

    prompt = pull_prompt(config.prompt_ref)
    tools = toolkit.get_tools()
    agent = create_structured_chat_agent(llm=llm, tools=tools, prompt=prompt)
    memory = build_memory()

    executor = AgentExecutor(
        agent=agent,
        tools=tools,
        memory=memory,
        return_intermediate_steps=False,
        handle_parsing_errors=config.handle_parsing_errors,
        verbose=config.verbose,
    )
    logger.info("Agent executor ready with %d tool(s)", len(tools))
    return executor

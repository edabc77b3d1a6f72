"""Hedera network client and LangChain toolkit."""

from .client import OperatorCredentials, build_hedera_client, load_credentials
from .configuration import AgentMode, Configuration, Context
from .toolkit import HederaLangchainToolkit

__all__ = [
    "AgentMode",
    "Configuration",
    "Context",
    "HederaLangchainToolkit",
    "OperatorCredentials",
    "build_hedera_client",
    "load_credentials",
]

import logging
from functools import partial
from typing import List, Optional

from hiero_sdk_python import Client
from langchain_core.tools import StructuredTool

from .configuration import Configuration
from .tools import HEDERA_TOOLS, HederaTool

logger = logging.getLogger(__name__)


class HederaLangchainToolkit:
    """Expose Hedera operations bound to one SDK client as LangChain tools."""

    def __init__(self, client: Client, configuration: Optional[Configuration] = None) -> None:
        self.client = client
        self.configuration = configuration or Configuration()
        self._tools = self._build_tools(self._select(self.configuration.tools))

    @staticmethod
    def _select(allow_list: List[str]) -> List[HederaTool]:
        if not allow_list:
            return list(HEDERA_TOOLS)

        known = {tool.name: tool for tool in HEDERA_TOOLS}
        unknown = sorted(set(allow_list) - set(known))
        if unknown:
            raise ValueError(
                f"Unknown Hedera tool(s): {', '.join(unknown)}. "
                f"Available tools: {', '.join(known)}."
            )
        return [tool for tool in HEDERA_TOOLS if tool.name in allow_list]

    def _build_tools(self, selected: List[HederaTool]) -> List[StructuredTool]:
        context = self.configuration.context
        tools = [
            StructuredTool.from_function(
                func=partial(tool.func, self.client, context),
                name=tool.name,
                description=tool.description,
                args_schema=tool.args_schema,
                handle_tool_error=True,
            )
            for tool in selected
        ]
        logger.info(
            "Loaded %d Hedera tool(s) in %s mode: %s",
            len(tools),
            context.mode.value,
            ", ".join(tool.name for tool in tools),
        )
        return tools

    def get_tools(self) -> List[StructuredTool]:
        return list(self._tools)

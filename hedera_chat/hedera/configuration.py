from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class AgentMode(str, Enum):
    """How state-changing tools treat the transactions they build."""

    AUTONOMOUS = "autonomous"
    RETURN_BYTES = "returnBytes"


@dataclass
class Context:
    mode: AgentMode = AgentMode.AUTONOMOUS
    # Default account for queries and payer for transfers.
    account_id: Optional[str] = None


@dataclass
class Configuration:
    # Empty means every tool the toolkit knows about.
    tools: List[str] = field(default_factory=list)
    context: Context = field(default_factory=Context)

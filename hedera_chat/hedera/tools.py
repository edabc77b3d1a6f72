"""
Hedera operations exposed to the agent.

Each operation is a plain function taking the SDK client and the toolkit
context first, followed by the arguments described by its input schema.
The toolkit binds the first two and hands the rest to LangChain.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional, Type

from hiero_sdk_python import (
    AccountId,
    Client,
    CryptoGetAccountBalanceQuery,
    ResponseCode,
    TopicCreateTransaction,
    TopicId,
    TopicMessageSubmitTransaction,
    TransferTransaction,
)
from hiero_sdk_python.exceptions import MaxAttemptsError, PrecheckError, ReceiptStatusError
from langchain_core.tools import ToolException
from pydantic import BaseModel, Field

from .configuration import AgentMode, Context

logger = logging.getLogger(__name__)

SDK_ERRORS = (PrecheckError, ReceiptStatusError, MaxAttemptsError)

TINYBARS_PER_HBAR = Decimal(100_000_000)


# Input schemas ---------------------------------------------------------------
class GetHbarBalanceInput(BaseModel):
    account_id: Optional[str] = Field(
        default=None,
        description="Account to query, e.g. 0.0.1234. Defaults to the operator account.",
    )


class TransferHbarInput(BaseModel):
    to_account_id: str = Field(description="Recipient account id, e.g. 0.0.5678")
    amount: float = Field(gt=0, description="Amount of HBAR to send")
    memo: Optional[str] = Field(default=None, description="Optional transaction memo")


class CreateTopicInput(BaseModel):
    memo: Optional[str] = Field(default=None, description="Optional topic memo")


class SubmitTopicMessageInput(BaseModel):
    topic_id: str = Field(description="Topic to post to, e.g. 0.0.4242")
    message: str = Field(min_length=1, description="Message body")


@dataclass(frozen=True)
class HederaTool:
    name: str
    description: str
    args_schema: Type[BaseModel]
    func: Callable[..., str]


# Helpers ---------------------------------------------------------------------
def _parse_account_id(value: str) -> AccountId:
    try:
        return AccountId.from_string(value.strip())
    except (ValueError, TypeError) as exc:
        raise ToolException(f"Invalid account id: {value!r}") from exc


def _parse_topic_id(value: str) -> TopicId:
    try:
        return TopicId.from_string(value.strip())
    except (ValueError, TypeError) as exc:
        raise ToolException(f"Invalid topic id: {value!r}") from exc


def _require_context_account(context: Context) -> AccountId:
    if not context.account_id:
        raise ToolException("No default account configured; pass an explicit account id.")
    return _parse_account_id(context.account_id)


def to_tinybars(amount: float) -> int:
    try:
        tinybars = Decimal(str(amount)) * TINYBARS_PER_HBAR
    except InvalidOperation as exc:
        raise ToolException(f"Invalid HBAR amount: {amount!r}") from exc
    if tinybars != tinybars.to_integral_value():
        raise ToolException(f"HBAR amount {amount} is more precise than one tinybar.")
    if tinybars <= 0:
        raise ToolException("HBAR amount must be positive.")
    return int(tinybars)


def _status_name(status) -> str:
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


def _execute(transaction, client: Client):
    try:
        receipt = transaction.execute(client)
    except SDK_ERRORS as exc:
        raise ToolException(f"Transaction failed: {exc}") from exc
    if receipt.status != ResponseCode.SUCCESS:
        raise ToolException(f"Transaction failed with status {_status_name(receipt.status)}")
    return receipt


def _finish(transaction, client: Client, context: Context):
    """Freeze ``transaction`` and either execute it or return its bytes."""
    transaction.freeze_with(client)
    if context.mode == AgentMode.RETURN_BYTES:
        return None, transaction.to_bytes().hex()
    return _execute(transaction, client), None


# Operations ------------------------------------------------------------------
def get_hbar_balance(client: Client, context: Context, account_id: Optional[str] = None) -> str:
    account = _parse_account_id(account_id) if account_id else _require_context_account(context)
    logger.info("Querying HBAR balance for %s", account)
    try:
        balance = CryptoGetAccountBalanceQuery().set_account_id(account).execute(client)
    except SDK_ERRORS as exc:
        raise ToolException(f"Balance query for {account} failed: {exc}") from exc
    return f"Account {account} has a balance of {balance.hbars}"


def transfer_hbar(
    client: Client,
    context: Context,
    to_account_id: str,
    amount: float,
    memo: Optional[str] = None,
) -> str:
    sender = _require_context_account(context)
    recipient = _parse_account_id(to_account_id)
    tinybars = to_tinybars(amount)
    logger.info("Transferring %s tinybars from %s to %s", tinybars, sender, recipient)

    transaction = (
        TransferTransaction()
        .add_hbar_transfer(sender, -tinybars)
        .add_hbar_transfer(recipient, tinybars)
    )
    if memo:
        transaction.set_transaction_memo(memo)

    receipt, payload = _finish(transaction, client, context)
    if payload is not None:
        return f"Unsigned transfer transaction bytes: {payload}"
    return f"Transferred {amount} HBAR from {sender} to {recipient}. Status: {_status_name(receipt.status)}"


def create_topic(client: Client, context: Context, memo: Optional[str] = None) -> str:
    logger.info("Creating topic (memo=%r)", memo)
    transaction = TopicCreateTransaction(memo=memo or "")

    receipt, payload = _finish(transaction, client, context)
    if payload is not None:
        return f"Unsigned topic creation transaction bytes: {payload}"
    return f"Created topic {receipt.topic_id}"


def submit_topic_message(client: Client, context: Context, topic_id: str, message: str) -> str:
    topic = _parse_topic_id(topic_id)
    logger.info("Submitting %d character message to topic %s", len(message), topic)
    transaction = TopicMessageSubmitTransaction(topic_id=topic, message=message)

    receipt, payload = _finish(transaction, client, context)
    if payload is not None:
        return f"Unsigned topic message transaction bytes: {payload}"
    return f"Message submitted to topic {topic}. Status: {_status_name(receipt.status)}"


HEDERA_TOOLS: List[HederaTool] = [
    HederaTool(
        name="get_hbar_balance",
        description=(
            "Return the HBAR balance of a Hedera account. "
            "Omit account_id to query the operator's own account."
        ),
        args_schema=GetHbarBalanceInput,
        func=get_hbar_balance,
    ),
    HederaTool(
        name="transfer_hbar",
        description="Transfer HBAR from the operator account to another Hedera account.",
        args_schema=TransferHbarInput,
        func=transfer_hbar,
    ),
    HederaTool(
        name="create_topic",
        description="Create a new Hedera Consensus Service topic and return its id.",
        args_schema=CreateTopicInput,
        func=create_topic,
    ),
    HederaTool(
        name="submit_topic_message",
        description="Submit a message to an existing Hedera Consensus Service topic.",
        args_schema=SubmitTopicMessageInput,
        func=submit_topic_message,
    ),
]

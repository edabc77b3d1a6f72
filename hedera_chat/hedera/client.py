import logging
import os
from dataclasses import dataclass

from hiero_sdk_python import AccountId, Client, Network, PrivateKey

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "testnet"
SUPPORTED_NETWORKS = {"testnet", "previewnet", "mainnet"}
SUPPORTED_KEY_TYPES = {"ecdsa", "ed25519"}


@dataclass(frozen=True)
class OperatorCredentials:
    account_id: str
    private_key: str

    def __repr__(self) -> str:
        return f"OperatorCredentials(account_id={self.account_id!r}, private_key='***')"


def load_credentials(
    account_var: str = "ACCOUNT_ID",
    key_var: str = "PRIVATE_KEY",
) -> OperatorCredentials:
    """
    Read the operator account id and private key from the environment.

    Raises:
        RuntimeError: if either variable is unset or blank.
    """
    account_id = (os.getenv(account_var) or "").strip()
    private_key = (os.getenv(key_var) or "").strip()

    missing = [name for name, value in ((account_var, account_id), (key_var, private_key)) if not value]
    if missing:
        raise RuntimeError(
            f"{', '.join(missing)} not set. Export the operator credentials or add them to your .env file."
        )
    return OperatorCredentials(account_id=account_id, private_key=private_key)


def parse_private_key(raw: str, key_type: str = "ecdsa") -> PrivateKey:
    key_type = key_type.lower()
    if key_type == "ecdsa":
        return PrivateKey.from_string_ecdsa(raw)
    if key_type == "ed25519":
        return PrivateKey.from_string_ed25519(raw)
    raise ValueError(
        f"Unsupported key type: {key_type}. Expected one of {sorted(SUPPORTED_KEY_TYPES)}."
    )


def build_hedera_client(
    credentials: OperatorCredentials,
    network: str = DEFAULT_NETWORK,
    key_type: str = "ecdsa",
) -> Client:
    """Return an SDK client for ``network`` with the operator set from ``credentials``."""
    network = network.lower()
    if network not in SUPPORTED_NETWORKS:
        raise ValueError(
            f"Unsupported Hedera network: {network}. Expected one of {sorted(SUPPORTED_NETWORKS)}."
        )

    operator_id = AccountId.from_string(credentials.account_id)
    operator_key = parse_private_key(credentials.private_key, key_type)

    client = Client(Network(network=network))
    client.set_operator(operator_id, operator_key)
    logger.info("Hedera client ready on %s for operator %s", network, operator_id)
    return client

"""
Arch RPC Client

JSON-RPC 2.0 client for an Arch node. Builds the request envelope, posts it
to a single endpoint and returns the ``result`` field. Errors reported by the
node are raised as ProtocolError with the server message unchanged; network
failures are raised as TransportError. Nothing is retried.
"""

from __future__ import annotations
import itertools
import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union

import pydantic
import requests

from .codec.wire import serialize_transaction, serialize_transactions
from .crypto.secp256k1 import SchnorrKeyPair
from .runtime.errors import ErrorCode, TransportError, ValidationError, error_from_response
from .signers.signer import PrivateKeyLike
from .tx.builder import sign_transaction
from .tx.system import create_account_instruction, transfer_account_ownership_instruction
from .types import (
    AccountInfoResult,
    Block,
    Message,
    ProcessedTransaction,
    Pubkey,
    RuntimeTransaction,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)

DEFAULT_ENDPOINT = "http://localhost:9002"

WELL_KNOWN_ENDPOINTS = {
    "local": DEFAULT_ENDPOINT,
}


class RpcMethod(str, Enum):
    """RPC methods exposed by an Arch node."""
    IS_NODE_READY = "is_node_ready"
    SEND_TRANSACTION = "send_transaction"
    SEND_TRANSACTIONS = "send_transactions"
    GET_ACCOUNT_ADDRESS = "get_account_address"
    READ_ACCOUNT_INFO = "read_account_info"
    GET_PROCESSED_TRANSACTION = "get_processed_transaction"
    GET_BLOCK_COUNT = "get_block_count"
    GET_BLOCK_HASH = "get_block_hash"
    GET_BLOCK = "get_block"
    START_DKG = "start_dkg"


@dataclass
class ClientConfig:
    """Configuration for the Arch RPC client."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0
    debug: bool = False
    verify_ssl: bool = True
    user_agent: str = "arch-python-sdk/0.1.0"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """
        Build a config from ARCH_RPC_URL and ARCH_RPC_TIMEOUT.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        config = cls(endpoint=env.get("ARCH_RPC_URL", DEFAULT_ENDPOINT))
        timeout = env.get("ARCH_RPC_TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError as e:
                raise ValidationError(f"Invalid ARCH_RPC_TIMEOUT: {timeout!r}", cause=e) from e
        return config


class ArchRpcClient:
    """
    Client for an Arch node's JSON-RPC API.

    Example:
        ```python
        with ArchRpcClient("http://localhost:9002") as client:
            if client.is_node_ready():
                txid = client.send_transaction(tx)
                processed = client.get_processed_transaction(txid)
        ```
    """

    def __init__(
        self,
        config: Union[str, ClientConfig, None] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Endpoint URL, well-known alias ("local") or ClientConfig;
                defaults to ClientConfig()
            session: Optional requests.Session for connection pooling
        """
        if config is None:
            config = ClientConfig()
        elif isinstance(config, str):
            config = ClientConfig(endpoint=config)
        self.config = config

        self._endpoint = WELL_KNOWN_ENDPOINTS.get(config.endpoint.lower(), config.endpoint)
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._request_ids = itertools.count(1)

        self.logger = logger
        if config.debug:
            self.logger.setLevel(logging.DEBUG)

    @property
    def endpoint(self) -> str:
        """Get the RPC endpoint."""
        return self._endpoint

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> ArchRpcClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Low-level RPC
    # =========================================================================

    def _next_request_id(self) -> int:
        return next(self._request_ids)

    def _call(self, method: str, params: Any, request_id: Optional[Union[int, str]] = None) -> Any:
        """
        Make a JSON-RPC 2.0 call.

        Args:
            method: RPC method name
            params: Method parameters, sent as given
            request_id: Correlation id; the client's counter is used when omitted

        Returns:
            The ``result`` field of the response

        Raises:
            ProtocolError: If the response carries an error object
            TransportError: If the request or response decoding fails
        """
        payload: Dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": self._next_request_id() if request_id is None else request_id,
            "method": str(method.value if isinstance(method, RpcMethod) else method),
            "params": params,
        }

        if self.config.debug:
            self.logger.debug("Request: %s", json.dumps(payload))

        try:
            response = self._session.post(
                self._endpoint,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": self.config.user_agent,
                },
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(
                f"HTTP error from {self._endpoint}: {e}",
                ErrorCode.HTTP_ERROR,
                details={"status": status, "method": payload["method"]},
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"HTTP request failed: {e}",
                details={"method": payload["method"]},
                cause=e,
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response: {e}",
                ErrorCode.INVALID_RESPONSE,
                details={"method": payload["method"]},
                cause=e,
            ) from e

        if not isinstance(body, dict):
            raise TransportError(
                f"Unexpected JSON-RPC response: {body!r}",
                ErrorCode.INVALID_RESPONSE,
                details={"method": payload["method"]},
            )

        if self.config.debug:
            self.logger.debug("Response: %s", json.dumps(body))

        error = error_from_response(body)
        if error is not None:
            self.logger.debug("RPC %s failed: %s", payload["method"], error.message)
            raise error

        return body.get("result")

    def call(self, method: Union[str, RpcMethod], params: Any = None,
             request_id: Optional[Union[int, str]] = None) -> Any:
        """
        Make a raw JSON-RPC call.

        Args:
            method: RPC method name
            params: Method parameters (an empty list when omitted)
            request_id: Optional caller-supplied correlation id

        Returns:
            Result from the RPC call
        """
        return self._call(method, [] if params is None else params, request_id)

    def _parse_result(self, model: Type[ModelT], method: RpcMethod, result: Any) -> ModelT:
        """
        Validate an RPC result against its response model.

        Raises:
            TransportError: With INVALID_RESPONSE if the node's result does
                not match the model
        """
        try:
            return model.model_validate(result)
        except (pydantic.ValidationError, ValidationError) as e:
            raise TransportError(
                f"Unexpected {method.value} result: {e}",
                ErrorCode.INVALID_RESPONSE,
                details={"method": method.value},
                cause=e,
            ) from e

    # =========================================================================
    # Transactions
    # =========================================================================

    def send_transaction(self, transaction: RuntimeTransaction) -> str:
        """
        Submit a signed transaction.

        Returns:
            Transaction id
        """
        return self._call(RpcMethod.SEND_TRANSACTION, serialize_transaction(transaction))

    def send_transactions(self, transactions: Sequence[RuntimeTransaction]) -> List[str]:
        """
        Submit several signed transactions in a single RPC call.

        Returns:
            Transaction ids in submission order
        """
        txids = self._call(RpcMethod.SEND_TRANSACTIONS, serialize_transactions(list(transactions)))
        if not isinstance(txids, list) or len(txids) != len(transactions):
            raise TransportError(
                f"Node returned {txids!r} for {len(transactions)} transactions",
                ErrorCode.INVALID_RESPONSE,
                details={"method": RpcMethod.SEND_TRANSACTIONS.value},
            )
        return txids

    def get_processed_transaction(self, txid: str) -> Optional[ProcessedTransaction]:
        """Look up a submitted transaction; None if the node does not know it."""
        result = self._call(RpcMethod.GET_PROCESSED_TRANSACTION, txid)
        if result is None:
            return None
        return self._parse_result(ProcessedTransaction, RpcMethod.GET_PROCESSED_TRANSACTION, result)

    def create_arch_account(self, private_key: PrivateKeyLike, txid: str, vout: int) -> str:
        """
        Create the account owned by ``private_key``, anchored to UTXO txid:vout.

        Returns:
            Transaction id
        """
        key_pair = SchnorrKeyPair.coerce(private_key)
        pubkey = key_pair.pubkey()
        message = Message(
            signers=(pubkey,),
            instructions=(create_account_instruction(pubkey, txid, vout),),
        )
        return self.send_transaction(sign_transaction(message, [key_pair]))

    def transfer_account_ownership(self, private_key: PrivateKeyLike,
                                   program_pubkey: Union[Pubkey, str]) -> str:
        """
        Transfer ownership of the key's account to a program.

        Returns:
            Transaction id
        """
        key_pair = SchnorrKeyPair.coerce(private_key)
        account = key_pair.pubkey()
        message = Message(
            signers=(account,),
            instructions=(transfer_account_ownership_instruction(account, Pubkey.parse(program_pubkey)),),
        )
        return self.send_transaction(sign_transaction(message, [key_pair]))

    # =========================================================================
    # Accounts
    # =========================================================================

    def get_account_address(self, pubkey: Union[Pubkey, str]) -> str:
        """Get the Bitcoin address associated with an account."""
        return self._call(RpcMethod.GET_ACCOUNT_ADDRESS, Pubkey.parse(pubkey).serialize())

    def read_account_info(self, pubkey: Union[Pubkey, str]) -> Optional[AccountInfoResult]:
        """Read an account's owner, data, UTXO and executable flag."""
        result = self._call(RpcMethod.READ_ACCOUNT_INFO, Pubkey.parse(pubkey).serialize())
        if result is None:
            return None
        return self._parse_result(AccountInfoResult, RpcMethod.READ_ACCOUNT_INFO, result)

    # =========================================================================
    # Node and blocks
    # =========================================================================

    def is_node_ready(self) -> bool:
        return self._call(RpcMethod.IS_NODE_READY, [])

    def get_block_count(self) -> int:
        return self._call(RpcMethod.GET_BLOCK_COUNT, [])

    def start_dkg(self) -> None:
        """Ask the node to start distributed key generation."""
        self._call(RpcMethod.START_DKG, [])

    def get_block_hash(self, height: int) -> str:
        return self._call(RpcMethod.GET_BLOCK_HASH, height)

    def get_block(self, block_hash: str) -> Optional[Block]:
        result = self._call(RpcMethod.GET_BLOCK, block_hash)
        if result is None:
            return None
        return self._parse_result(Block, RpcMethod.GET_BLOCK, result)


def local_client(**kwargs: Any) -> ArchRpcClient:
    """Client for a node on the default local endpoint."""
    return ArchRpcClient(ClientConfig(endpoint=DEFAULT_ENDPOINT, **kwargs))


__all__ = [
    "DEFAULT_ENDPOINT",
    "RpcMethod",
    "ClientConfig",
    "ArchRpcClient",
    "local_client",
]

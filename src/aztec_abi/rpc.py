"""PXE JSON-RPC client for aztec-abi library."""

import itertools
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from .config import PxeConfig
from .exceptions import PxeConnectionError, PxeError, PxeNotReadyError, PxeRpcError

logger = logging.getLogger(__name__)


class PxeClient:
    """Minimal JSON-RPC 2.0 client for a PXE node."""

    def __init__(self, config: PxeConfig, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Connection configuration
            session: HTTP session to reuse (a new one is created if None)
        """
        self.config = config
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    def _method_name(self, method: str) -> str:
        if self.config.namespace:
            return f"{self.config.namespace}_{method}"
        return method

    def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Call a JSON-RPC method.

        Args:
            method: Method name without namespace (e.g. "getBlockNumber")
            params: Positional parameters

        Returns:
            The `result` member of the response

        Raises:
            PxeConnectionError: If the request fails or HTTP status is not 200
            PxeRpcError: If the response carries an error or no result
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": self._method_name(method),
            "params": params or [],
        }
        logger.debug("PXE request %s", payload["method"])

        try:
            response = self._session.post(self.config.url, json=payload, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise PxeConnectionError(f"Network error during RPC call: {e}") from e

        if response.status_code != 200:
            raise PxeConnectionError(f"RPC request failed with status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise PxeRpcError(f"Invalid JSON in RPC response: {e}") from e

        if not isinstance(body, dict):
            raise PxeRpcError(f"Expected a JSON object in RPC response, got {type(body).__name__}")
        if body.get("error") is not None:
            raise PxeRpcError(f"PXE returned error: {body['error']}")
        if "result" not in body:
            raise PxeRpcError("Missing `result` field in RPC response")

        return body["result"]

    def get_node_info(self) -> Dict[str, Any]:
        return self.request("getNodeInfo")

    def get_block_number(self) -> int:
        return self.request("getBlockNumber")

    def get_contracts(self) -> List[str]:
        return self.request("getContracts")

    def get_contract_metadata(self, address: str) -> Dict[str, Any]:
        """
        Get instance metadata for a deployed contract.

        Args:
            address: Contract address (0x-prefixed hex)

        Returns:
            Metadata dictionary (contractInstance, class registration flags, ...)
        """
        return self.request("getContractMetadata", [address])


def wait_for_pxe(
    client: PxeClient,
    max_attempts: int,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Block until the PXE answers getNodeInfo.

    Args:
        client: Client to poll
        max_attempts: Number of attempts before giving up
        delay: Seconds to wait between failed attempts
        sleep: Sleep function (injectable for tests)

    Raises:
        PxeNotReadyError: If every attempt failed
    """
    for attempt in range(1, max_attempts + 1):
        try:
            client.get_node_info()
        except PxeError as e:
            logger.info("Attempt %d/%d: PXE not ready (%s)", attempt, max_attempts, e)
            if attempt < max_attempts:
                sleep(delay)
            continue
        logger.info("PXE is online at %s", client.config.url)
        return

    raise PxeNotReadyError(f"PXE at {client.config.url} did not respond in time")


def setup_pxe(config: Optional[PxeConfig] = None) -> PxeClient:
    """
    Create a client and wait until its PXE is online.

    Args:
        config: Connection configuration (defaults to PxeConfig.from_env())

    Returns:
        Ready PxeClient
    """
    if config is None:
        config = PxeConfig.from_env()

    client = PxeClient(config)
    wait_for_pxe(client, config.max_attempts, config.retry_delay)
    return client

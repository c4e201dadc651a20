"""PXE connection configuration for aztec-abi library."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_PXE_NAMESPACE,
    DEFAULT_PXE_URL,
    DEFAULT_READY_ATTEMPTS,
    DEFAULT_READY_DELAY,
    DEFAULT_RPC_TIMEOUT,
    PXE_URL_ENV,
)


@dataclass(frozen=True)
class PxeConfig:
    """Where and how to reach a PXE node."""

    url: str = DEFAULT_PXE_URL
    namespace: Optional[str] = DEFAULT_PXE_NAMESPACE
    timeout: float = DEFAULT_RPC_TIMEOUT
    max_attempts: int = DEFAULT_READY_ATTEMPTS
    retry_delay: float = DEFAULT_READY_DELAY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PxeConfig":
        """
        Build configuration from the environment.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            PxeConfig using $PXE_URL when set, defaults otherwise
        """
        if environ is None:
            environ = os.environ

        url = environ.get(PXE_URL_ENV) or DEFAULT_PXE_URL
        return cls(url=url)

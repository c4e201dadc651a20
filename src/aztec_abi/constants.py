"""Configuration constants for aztec-abi library."""

# PXE endpoint defaults (overridable through the environment, see config.py)
DEFAULT_PXE_URL = "http://localhost:8080"
DEFAULT_PXE_NAMESPACE = "pxe"
PXE_URL_ENV = "PXE_URL"

# JSON-RPC request defaults
DEFAULT_RPC_TIMEOUT = 30
DEFAULT_READY_ATTEMPTS = 10
DEFAULT_READY_DELAY = 2.0

# Function selectors are the first 4 bytes of keccak256(signature)
SELECTOR_SIZE = 4

# Strings are encoded one byte-sized character per element
MAX_STRING_CHAR = 0xFF

# Field elements render as 32-byte hex strings
FIELD_HEX_WIDTH = 64

# Artifact discriminators
INTEGER_SIGNS = {"signed": True, "unsigned": False}

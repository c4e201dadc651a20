"""
aztec-abi: Python library for encoding Aztec contract function arguments
"""

from importlib.metadata import PackageNotFoundError, version

from .artifacts import get_function_artifact, load_contract_artifact, load_contract_artifact_json
from .calls import FunctionCall, build_function_call
from .config import PxeConfig
from .encoder import ArgumentEncoder, encode_arguments, leaf_count
from .exceptions import (
    AbiError,
    ArgumentCountMismatchError,
    ArrayLengthMismatchError,
    ArtifactNotFoundError,
    ArtifactParseError,
    EncodingError,
    MissingStructFieldError,
    PxeConnectionError,
    PxeError,
    PxeNotReadyError,
    PxeRpcError,
    UnknownFunctionError,
    UnparsableIntegerError,
    UnsupportedValueShapeError,
)
from .fields import Fr
from .rpc import PxeClient, setup_pxe, wait_for_pxe
from .selectors import FunctionSelector, abi_type_signature, function_signature
from .types import (
    AbiParameter,
    ArrayType,
    BooleanType,
    ContractArtifact,
    FieldType,
    FunctionAbi,
    FunctionArtifact,
    FunctionType,
    IntegerType,
    StringType,
    StructField,
    StructType,
)

try:
    __version__ = version("aztec-abi")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Fr",
    "FieldType",
    "BooleanType",
    "ArrayType",
    "StringType",
    "StructField",
    "StructType",
    "IntegerType",
    "AbiParameter",
    "FunctionAbi",
    "FunctionArtifact",
    "FunctionType",
    "ContractArtifact",
    "load_contract_artifact",
    "load_contract_artifact_json",
    "get_function_artifact",
    "FunctionSelector",
    "abi_type_signature",
    "function_signature",
    "ArgumentEncoder",
    "encode_arguments",
    "leaf_count",
    "FunctionCall",
    "build_function_call",
    "PxeConfig",
    "PxeClient",
    "wait_for_pxe",
    "setup_pxe",
    "AbiError",
    "EncodingError",
    "UnsupportedValueShapeError",
    "ArrayLengthMismatchError",
    "MissingStructFieldError",
    "UnparsableIntegerError",
    "ArgumentCountMismatchError",
    "UnknownFunctionError",
    "ArtifactParseError",
    "ArtifactNotFoundError",
    "PxeError",
    "PxeConnectionError",
    "PxeRpcError",
    "PxeNotReadyError",
]

"""Data types and dataclasses for aztec-abi library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class FunctionType(Enum):
    """
    Contract function kinds.

    Value strings are the `functionType` values found in artifacts.
    """

    PRIVATE = "private"
    PUBLIC = "public"
    UTILITY = "utility"
    UNCONSTRAINED = "unconstrained"


@dataclass(frozen=True)
class FieldType:
    """One opaque numeric value."""


@dataclass(frozen=True)
class BooleanType:
    """One value in {0, 1}."""


@dataclass(frozen=True)
class ArrayType:
    """Exactly `length` elements of `element`."""

    element: "AbiType"
    length: int


@dataclass(frozen=True)
class StringType:
    """Exactly `length` character slots."""

    length: int


@dataclass(frozen=True)
class StructField:
    """Named member of a struct type."""

    name: str
    abi_type: "AbiType"


@dataclass(frozen=True)
class StructType:
    """Ordered named fields; order is fixed by the schema."""

    fields: Tuple[StructField, ...]
    path: str = ""


@dataclass(frozen=True)
class IntegerType:
    """One integer of `width` bits, optionally signed."""

    signed: bool
    width: int


AbiType = Union[FieldType, BooleanType, ArrayType, StringType, StructType, IntegerType]


@dataclass(frozen=True)
class AbiParameter:
    """A positional function parameter."""

    name: str
    abi_type: AbiType
    visibility: Optional[str] = None


@dataclass(frozen=True)
class FunctionAbi:
    """Callable interface of a contract function."""

    name: str
    function_type: FunctionType
    parameters: Tuple[AbiParameter, ...]
    is_initializer: bool = False
    is_static: bool = False


@dataclass(frozen=True)
class FunctionArtifact(FunctionAbi):
    """A contract function with its compiled bytecode and metadata."""

    # Optional fields (compiler output)
    bytecode: bytes = b""
    verification_key: Optional[str] = None
    debug_symbols: str = ""
    debug: Optional[Dict[str, Any]] = field(default=None, compare=False)


@dataclass(frozen=True)
class ContractArtifact:
    """A compiled contract: its functions plus auxiliary metadata."""

    # Required fields
    name: str
    functions: Tuple[FunctionArtifact, ...]

    # Auxiliary metadata, consumed opaquely
    non_dispatch_public_functions: Tuple[FunctionAbi, ...] = ()
    outputs: Dict[str, Any] = field(default_factory=dict, compare=False)
    storage_layout: Dict[str, Any] = field(default_factory=dict, compare=False)
    notes: Dict[str, Any] = field(default_factory=dict, compare=False)
    file_map: Dict[str, Any] = field(default_factory=dict, compare=False)

    def function_names(self) -> List[str]:
        """
        Get the names of all dispatchable functions, in artifact order.

        Returns:
            List of function names
        """
        return [f.name for f in self.functions]

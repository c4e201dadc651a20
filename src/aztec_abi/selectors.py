"""Canonical signatures and function selectors for aztec-abi library."""

import re
from dataclasses import dataclass
from typing import Sequence

from eth_utils import keccak

from .constants import SELECTOR_SIZE
from .fields import Fr
from .types import (
    AbiParameter,
    AbiType,
    ArrayType,
    BooleanType,
    FieldType,
    IntegerType,
    StringType,
    StructType,
)

_SELECTOR_RE = re.compile(r"[0-9a-f]{%d}" % (SELECTOR_SIZE * 2))


def abi_type_signature(abi_type: AbiType, expand_structs: bool = False) -> str:
    """
    Render an ABI type in canonical signature form.

    Args:
        abi_type: Type to render
        expand_structs: Render structs as "(t1,t2,...)" instead of "struct"

    Returns:
        One of field, bool, T[n], string[n], struct, u{width} or i{width}
    """
    if isinstance(abi_type, FieldType):
        return "field"
    if isinstance(abi_type, BooleanType):
        return "bool"
    if isinstance(abi_type, ArrayType):
        return f"{abi_type_signature(abi_type.element, expand_structs)}[{abi_type.length}]"
    if isinstance(abi_type, StringType):
        return f"string[{abi_type.length}]"
    if isinstance(abi_type, StructType):
        if not expand_structs:
            return "struct"
        inner = ",".join(abi_type_signature(f.abi_type, expand_structs) for f in abi_type.fields)
        return f"({inner})"
    if isinstance(abi_type, IntegerType):
        return f"{'i' if abi_type.signed else 'u'}{abi_type.width}"
    raise TypeError(f"Not an ABI type: {abi_type!r}")


def function_signature(
    name: str, parameters: Sequence[AbiParameter], expand_structs: bool = False
) -> str:
    """
    Build the canonical signature `name(type1,type2,...)` of a function.

    Args:
        name: Function name
        parameters: Ordered function parameters
        expand_structs: Render struct parameters with their field types

    Returns:
        Canonical signature string
    """
    types = ",".join(abi_type_signature(p.abi_type, expand_structs) for p in parameters)
    return f"{name}({types})"


@dataclass(frozen=True)
class FunctionSelector:
    """First 4 bytes of keccak256(signature), as 8 lowercase hex characters."""

    value: str

    def __post_init__(self):
        if not _SELECTOR_RE.fullmatch(self.value):
            raise ValueError(f"Invalid function selector: {self.value!r}")

    @classmethod
    def from_signature(cls, signature: str) -> "FunctionSelector":
        """
        Derive a selector from a canonical signature string.

        Args:
            signature: e.g. "set_value(field,u32)"

        Returns:
            FunctionSelector
        """
        digest = keccak(text=signature)
        return cls(digest[:SELECTOR_SIZE].hex())

    @classmethod
    def from_name_and_parameters(
        cls, name: str, parameters: Sequence[AbiParameter], expand_structs: bool = False
    ) -> "FunctionSelector":
        """Derive the selector of a function from its name and parameters."""
        return cls.from_signature(function_signature(name, parameters, expand_structs))

    @classmethod
    def from_str(cls, text: str) -> "FunctionSelector":
        """
        Parse a selector string, with or without 0x prefix, in any case.

        Raises:
            ValueError: If text is not 8 hex characters
        """
        return cls(normalize_selector(text))

    def to_hex(self) -> str:
        return "0x" + self.value

    def to_field(self) -> Fr:
        """Selector as a field element (big-endian integer of the 4 bytes)."""
        return Fr(int(self.value, 16))

    def __str__(self) -> str:
        return self.value


def normalize_selector(text: str) -> str:
    """Strip an optional 0x prefix and lowercase a selector string."""
    text = text.strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    return text

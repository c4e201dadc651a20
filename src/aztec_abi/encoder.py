"""Argument encoder for aztec-abi library.

Flattens loosely-typed call arguments into the ordered field elements a
contract function expects, guided by the function's parameter types.
"""

import logging
import re
from typing import Any, List, Sequence

from .constants import MAX_STRING_CHAR
from .exceptions import (
    ArgumentCountMismatchError,
    ArrayLengthMismatchError,
    MissingStructFieldError,
    UnparsableIntegerError,
    UnsupportedValueShapeError,
)
from .fields import ZERO, Fr
from .types import (
    AbiParameter,
    AbiType,
    ArrayType,
    BooleanType,
    FieldType,
    FunctionAbi,
    IntegerType,
    StringType,
    StructType,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?[0-9]+")


def leaf_count(abi_type: AbiType) -> int:
    """
    Number of field elements any value of `abi_type` encodes to.

    Args:
        abi_type: Type to measure

    Returns:
        1 for field, boolean and integer; n for string[n];
        n * leaf_count(T) for T[n]; the sum over fields for structs
    """
    if isinstance(abi_type, (FieldType, BooleanType, IntegerType)):
        return 1
    if isinstance(abi_type, StringType):
        return abi_type.length
    if isinstance(abi_type, ArrayType):
        return abi_type.length * leaf_count(abi_type.element)
    if isinstance(abi_type, StructType):
        return sum(leaf_count(f.abi_type) for f in abi_type.fields)
    raise TypeError(f"Not an ABI type: {abi_type!r}")


def _describe(value: Any) -> str:
    text = repr(value)
    return text if len(text) <= 60 else text[:57] + "..."


class ArgumentEncoder:
    """
    Encodes one call's arguments against its parameter list.

    Build one encoder per call; it only holds its inputs and the output
    buffer. On failure the buffer is left partially filled and must be
    discarded.
    """

    def __init__(self, parameters: Sequence[AbiParameter], args: Sequence[Any]):
        self.parameters = list(parameters)
        self.args = list(args)
        self.flattened: List[Fr] = []

    def encode(self) -> List[Fr]:
        """
        Flatten all arguments in parameter order.

        Returns:
            Ordered list of field elements

        Raises:
            ArgumentCountMismatchError: If args and parameters differ in count
            EncodingError: First failure found while encoding, naming its path
        """
        if len(self.args) != len(self.parameters):
            raise ArgumentCountMismatchError(
                f"Expected {len(self.parameters)} arguments, got {len(self.args)}"
            )

        self.flattened = []
        for param, arg in zip(self.parameters, self.args):
            self._encode_argument(param.abi_type, arg, param.name)

        return list(self.flattened)

    def _encode_argument(self, abi_type: AbiType, arg: Any, path: str) -> None:
        if isinstance(abi_type, FieldType):
            self.flattened.append(self._encode_field(arg, path))
        elif isinstance(abi_type, BooleanType):
            if not isinstance(arg, bool):
                raise UnsupportedValueShapeError(
                    f"Expected a boolean for {path}, got {_describe(arg)}", path
                )
            self.flattened.append(Fr(int(arg)))
        elif isinstance(abi_type, ArrayType):
            self._encode_array(abi_type, arg, path)
        elif isinstance(abi_type, StringType):
            self._encode_string(abi_type, arg, path)
        elif isinstance(abi_type, StructType):
            self._encode_struct(abi_type, arg, path)
        elif isinstance(abi_type, IntegerType):
            self.flattened.append(self._encode_integer(abi_type, arg, path))
        else:
            raise TypeError(f"Not an ABI type: {abi_type!r}")

    def _encode_field(self, arg: Any, path: str) -> Fr:
        # bool before int: bool is an int subclass
        if isinstance(arg, bool):
            return Fr(int(arg))
        if isinstance(arg, int) and arg >= 0:
            return Fr(arg)
        if isinstance(arg, str):
            try:
                return Fr.from_str(arg.strip())
            except ValueError:
                pass
        raise UnsupportedValueShapeError(
            f"Unsupported Field arg for {path}: {_describe(arg)}", path
        )

    def _encode_array(self, abi_type: ArrayType, arg: Any, path: str) -> None:
        if not isinstance(arg, (list, tuple)):
            raise UnsupportedValueShapeError(
                f"Expected an array for {path}, got {_describe(arg)}", path
            )
        if len(arg) != abi_type.length:
            raise ArrayLengthMismatchError(
                f"Array length mismatch for {path}: expected {abi_type.length}, got {len(arg)}",
                path,
            )

        for i, elem in enumerate(arg):
            self._encode_argument(abi_type.element, elem, f"{path}[{i}]")

    def _encode_string(self, abi_type: StringType, arg: Any, path: str) -> None:
        if not isinstance(arg, str):
            raise UnsupportedValueShapeError(
                f"Expected a string for {path}, got {_describe(arg)}", path
            )
        if len(arg) > abi_type.length:
            logger.warning(
                "Truncating %s from %d to %d characters", path, len(arg), abi_type.length
            )

        for i in range(abi_type.length):
            if i >= len(arg):
                self.flattened.append(ZERO)
                continue
            code = ord(arg[i])
            if code > MAX_STRING_CHAR:
                raise UnsupportedValueShapeError(
                    f"Character {arg[i]!r} at {path}[{i}] does not fit in one byte", path
                )
            self.flattened.append(Fr.from_byte(code))

    def _encode_struct(self, abi_type: StructType, arg: Any, path: str) -> None:
        if not isinstance(arg, dict):
            raise UnsupportedValueShapeError(
                f"Expected an object for struct {path}, got {_describe(arg)}", path
            )

        # Declared order; extra keys in arg are ignored
        for field in abi_type.fields:
            field_path = f"{path}.{field.name}"
            if field.name not in arg:
                raise MissingStructFieldError(f"Missing struct field {field_path}", field_path)
            self._encode_argument(field.abi_type, arg[field.name], field_path)

    def _encode_integer(self, abi_type: IntegerType, arg: Any, path: str) -> Fr:
        if isinstance(arg, str):
            text = arg.strip()
            if not _INTEGER_RE.fullmatch(text):
                raise UnparsableIntegerError(f"Invalid integer string for {path}: {_describe(arg)}", path)
            value = int(text)
        elif isinstance(arg, int) and not isinstance(arg, bool):
            value = arg
        else:
            raise UnsupportedValueShapeError(
                f"Unsupported integer input for {path}: {_describe(arg)}", path
            )

        width = abi_type.width
        if width <= 0:
            raise UnparsableIntegerError(f"Invalid integer width {width} at {path}", path)
        if abi_type.signed:
            low, high = -(1 << (width - 1)), (1 << (width - 1)) - 1
        else:
            low, high = 0, (1 << width) - 1
        if not low <= value <= high:
            kind = f"{'i' if abi_type.signed else 'u'}{width}"
            raise UnparsableIntegerError(f"Value {value} out of range for {kind} at {path}", path)

        # Two's complement within the declared width
        if value < 0:
            value += 1 << width
        return Fr(value)


def encode_arguments(function_abi: FunctionAbi, args: Sequence[Any]) -> List[Fr]:
    """
    Encode call arguments for a function.

    Args:
        function_abi: Function whose parameters drive the encoding
        args: Raw argument values, one per parameter, in parameter order

    Returns:
        Ordered list of field elements

    Raises:
        EncodingError: If any argument does not match its declared type
    """
    return ArgumentEncoder(function_abi.parameters, args).encode()

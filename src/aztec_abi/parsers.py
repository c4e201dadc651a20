"""Contract artifact parsers for aztec-abi library."""

import base64
import binascii
from typing import Any, Dict, List, Tuple

from .constants import INTEGER_SIGNS
from .exceptions import ArtifactParseError
from .types import (
    AbiParameter,
    AbiType,
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


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    """Fetch a required key or raise ArtifactParseError naming its location."""
    if not isinstance(data, dict):
        raise ArtifactParseError(f"Expected an object at {where}, got {type(data).__name__}")
    if key not in data:
        raise ArtifactParseError(f"Missing '{key}' at {where}")
    return data[key]


def _require_length(data: Dict[str, Any], where: str) -> int:
    length = _require(data, "length", where)
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ArtifactParseError(f"Invalid length {length!r} at {where}")
    return length


def _require_list(data: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = _require(data, key, where)
    if not isinstance(value, list):
        raise ArtifactParseError(f"Expected '{key}' to be a list at {where}")
    return value


def _optional_list(data: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ArtifactParseError(f"Expected '{key}' to be a list at {where}")
    return value


def _optional_object(data: Dict[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ArtifactParseError(f"Expected '{key}' to be an object at {where}")
    return value


def _optional_bool(data: Dict[str, Any], key: str, where: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ArtifactParseError(f"Expected '{key}' to be a boolean at {where}, got {value!r}")
    return value


def parse_abi_type(data: Dict[str, Any], where: str = "type") -> AbiType:
    """
    Parse an ABI type descriptor.

    The descriptor is a tagged union discriminated by `kind`:
    - field, boolean: no extra members
    - array: `length` and element `type`
    - string: `length`
    - struct: `fields` (list of {name, type}) and `path`
    - integer: `sign` ("signed" or "unsigned") and `width`

    Args:
        data: Type descriptor from the artifact document
        where: Location of the descriptor, used in error messages

    Returns:
        Typed AbiType tree

    Raises:
        ArtifactParseError: If the descriptor is malformed or its kind is unknown
    """
    kind = _require(data, "kind", where)

    if kind == "field":
        return FieldType()
    if kind == "boolean":
        return BooleanType()
    if kind == "array":
        length = _require_length(data, where)
        element = parse_abi_type(_require(data, "type", where), f"{where}.type")
        return ArrayType(element=element, length=length)
    if kind == "string":
        return StringType(length=_require_length(data, where))
    if kind == "struct":
        fields = []
        for i, raw_field in enumerate(_require_list(data, "fields", where)):
            field_where = f"{where}.fields[{i}]"
            name = _require(raw_field, "name", field_where)
            field_type = parse_abi_type(_require(raw_field, "type", field_where), f"{field_where}.type")
            fields.append(StructField(name=name, abi_type=field_type))
        return StructType(fields=tuple(fields), path=data.get("path", ""))
    if kind == "integer":
        sign = _require(data, "sign", where)
        if sign not in INTEGER_SIGNS:
            raise ArtifactParseError(f"Unknown integer sign {sign!r} at {where}")
        width = _require(data, "width", where)
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ArtifactParseError(f"Invalid integer width {width!r} at {where}")
        return IntegerType(signed=INTEGER_SIGNS[sign], width=width)

    raise ArtifactParseError(f"Unknown ABI type kind {kind!r} at {where}")


def parse_parameter(data: Dict[str, Any], where: str = "parameter") -> AbiParameter:
    """
    Parse a function parameter.

    Args:
        data: Parameter object with `name`, `type` and optional `visibility`
        where: Location of the parameter, used in error messages

    Returns:
        AbiParameter
    """
    name = _require(data, "name", where)
    abi_type = parse_abi_type(_require(data, "type", where), f"{where}.type")
    return AbiParameter(name=name, abi_type=abi_type, visibility=data.get("visibility"))


def _parse_function_type(data: Dict[str, Any], where: str) -> FunctionType:
    raw = _require(data, "functionType", where)
    try:
        return FunctionType(raw)
    except ValueError as e:
        raise ArtifactParseError(f"Unknown function type {raw!r} at {where}") from e


def _parse_parameters(data: Dict[str, Any], where: str) -> Tuple[AbiParameter, ...]:
    return tuple(
        parse_parameter(p, f"{where}.parameters[{i}]")
        for i, p in enumerate(_require_list(data, "parameters", where))
    )


def decode_bytecode(raw: str, where: str = "bytecode") -> bytes:
    """
    Decode base64-encoded function bytecode.

    Raises:
        ArtifactParseError: If raw is not valid base64
    """
    if not isinstance(raw, str):
        raise ArtifactParseError(f"Expected base64 string at {where}")
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ArtifactParseError(f"Invalid base64 bytecode at {where}: {e}") from e


def parse_function_abi(data: Dict[str, Any], where: str = "function") -> FunctionAbi:
    """
    Parse a function ABI (no bytecode), as found in nonDispatchPublicFunctions.

    Args:
        data: Function object
        where: Location of the function, used in error messages

    Returns:
        FunctionAbi
    """
    return FunctionAbi(
        name=_require(data, "name", where),
        function_type=_parse_function_type(data, where),
        parameters=_parse_parameters(data, where),
        is_initializer=_optional_bool(data, "isInitializer", where),
        is_static=_optional_bool(data, "isStatic", where),
    )


def parse_function_artifact(data: Dict[str, Any], where: str = "function") -> FunctionArtifact:
    """
    Parse a compiled function.

    Args:
        data: Function object with `name`, `functionType`, `parameters`,
              `bytecode` and optional `verificationKey`, `debugSymbols`, `debug`
        where: Location of the function, used in error messages

    Returns:
        FunctionArtifact

    Raises:
        ArtifactParseError: If required fields are missing or malformed
    """
    abi = parse_function_abi(data, where)
    return FunctionArtifact(
        name=abi.name,
        function_type=abi.function_type,
        parameters=abi.parameters,
        is_initializer=abi.is_initializer,
        is_static=abi.is_static,
        bytecode=decode_bytecode(_require(data, "bytecode", where), f"{where}.bytecode"),
        verification_key=data.get("verificationKey"),
        debug_symbols=data.get("debugSymbols", ""),
        debug=data.get("debug"),
    )


def parse_contract_artifact(data: Dict[str, Any]) -> ContractArtifact:
    """
    Parse a contract artifact document into the typed artifact tree.

    Args:
        data: Decoded artifact JSON

    Returns:
        ContractArtifact with all functions parsed and auxiliary
        metadata (outputs, storageLayout, notes, fileMap) kept as-is

    Raises:
        ArtifactParseError: If the document is malformed
    """
    name = _require(data, "name", "artifact")

    functions = tuple(
        parse_function_artifact(f, f"functions[{i}]")
        for i, f in enumerate(_require_list(data, "functions", "artifact"))
    )

    # Auxiliary metadata (all optional)
    non_dispatch = tuple(
        parse_function_abi(f, f"nonDispatchPublicFunctions[{i}]")
        for i, f in enumerate(_optional_list(data, "nonDispatchPublicFunctions", "artifact"))
    )

    return ContractArtifact(
        name=name,
        functions=functions,
        non_dispatch_public_functions=non_dispatch,
        outputs=_optional_object(data, "outputs", "artifact"),
        storage_layout=_optional_object(data, "storageLayout", "artifact"),
        notes=_optional_object(data, "notes", "artifact"),
        file_map=_optional_object(data, "fileMap", "artifact"),
    )

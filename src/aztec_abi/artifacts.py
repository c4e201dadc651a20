"""Contract artifact loading and function lookup for aztec-abi library."""

import json
import logging
from pathlib import Path
from typing import Union

from .exceptions import ArtifactNotFoundError, ArtifactParseError, UnknownFunctionError
from .parsers import parse_contract_artifact
from .selectors import FunctionSelector, normalize_selector
from .types import ContractArtifact, FunctionArtifact

logger = logging.getLogger(__name__)


def load_contract_artifact(artifact_path: Union[Path, str]) -> ContractArtifact:
    """
    Load a contract artifact from a JSON file.

    Args:
        artifact_path: Path to the compiled contract artifact

    Returns:
        ContractArtifact

    Raises:
        ArtifactNotFoundError: If the file doesn't exist
        ArtifactParseError: If the file is not valid JSON or not a valid artifact
    """
    path = Path(artifact_path)
    if not path.exists():
        raise ArtifactNotFoundError(f"Contract artifact not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ArtifactParseError(f"Artifact at {path} is not valid UTF-8: {e}") from e

    artifact = load_contract_artifact_json(text)
    logger.debug("Loaded artifact %s (%d functions) from %s", artifact.name, len(artifact.functions), path)
    return artifact


def load_contract_artifact_json(text: str) -> ContractArtifact:
    """
    Load a contract artifact from a JSON string.

    Args:
        text: Artifact JSON document

    Returns:
        ContractArtifact

    Raises:
        ArtifactParseError: If text is not valid JSON or not a valid artifact
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(f"Invalid artifact JSON: {e}") from e

    if not isinstance(data, dict):
        raise ArtifactParseError("Artifact document must be a JSON object")

    return parse_contract_artifact(data)


def get_function_artifact(
    artifact: ContractArtifact, function_name_or_selector: str
) -> FunctionArtifact:
    """
    Find a function by name, or by its selector.

    Names are matched first so that no hashing happens in the common case.
    Selectors may carry a 0x prefix and any letter case.

    Args:
        artifact: Loaded contract artifact
        function_name_or_selector: Function name or 8-hex-character selector

    Returns:
        The matching FunctionArtifact

    Raises:
        UnknownFunctionError: If nothing matches
    """
    # Match by name
    for fn in artifact.functions:
        if fn.name == function_name_or_selector:
            return fn

    # Match by selector
    wanted = normalize_selector(function_name_or_selector)
    for fn in artifact.functions:
        selector = FunctionSelector.from_name_and_parameters(fn.name, fn.parameters)
        if selector.value == wanted:
            logger.debug("Resolved selector %s to %s.%s", wanted, artifact.name, fn.name)
            return fn

    raise UnknownFunctionError(f"Unknown function '{function_name_or_selector}'.")

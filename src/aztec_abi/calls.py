"""Function call payloads for aztec-abi library."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .artifacts import get_function_artifact
from .encoder import encode_arguments
from .fields import Fr
from .selectors import FunctionSelector
from .types import ContractArtifact, FunctionType


@dataclass(frozen=True)
class FunctionCall:
    """Everything a transaction builder needs to call one contract function."""

    name: str
    selector: FunctionSelector
    args: Tuple[Fr, ...]
    function_type: FunctionType
    to: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize for a JSON-RPC payload.

        Returns:
            Dictionary with name, 0x-prefixed selector, hex args, type and target
        """
        return {
            "name": self.name,
            "selector": self.selector.to_hex(),
            "args": [arg.to_hex() for arg in self.args],
            "type": self.function_type.value,
            "to": self.to,
        }


def build_function_call(
    artifact: ContractArtifact,
    function_name_or_selector: str,
    args: Sequence[Any],
    to: Optional[str] = None,
) -> FunctionCall:
    """
    Resolve a function and encode its arguments into a call payload.

    Args:
        artifact: Loaded contract artifact
        function_name_or_selector: Function name or selector
        args: Raw argument values in parameter order
        to: Target contract address, if known

    Returns:
        FunctionCall

    Raises:
        UnknownFunctionError: If the function is not in the artifact
        EncodingError: If the arguments do not match the parameters
    """
    fn = get_function_artifact(artifact, function_name_or_selector)
    encoded = encode_arguments(fn, args)
    return FunctionCall(
        name=fn.name,
        selector=FunctionSelector.from_name_and_parameters(fn.name, fn.parameters),
        args=tuple(encoded),
        function_type=fn.function_type,
        to=to,
    )

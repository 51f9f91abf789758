"""Compiled contract artifact loading."""

from pathlib import Path
from typing import Union

import orjson

from ..errors import ConfigurationError


def load_contract_abi(path: Union[str, Path]) -> list:
    """
    Read the ABI from a compiled contract artifact.

    Args:
        path: Artifact JSON file with a top-level "abi" list

    Returns:
        The ABI entries

    Raises:
        ConfigurationError: If the file is missing, malformed or has no ABI
    """
    artifact_path = Path(path)

    try:
        artifact = orjson.loads(artifact_path.read_bytes())
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Contract artifact not found: {artifact_path}",
            context={"path": str(artifact_path)}
        ) from e
    except orjson.JSONDecodeError as e:
        raise ConfigurationError(
            f"Contract artifact is not valid JSON: {artifact_path}",
            context={"path": str(artifact_path), "error": str(e)}
        ) from e

    abi = artifact.get("abi") if isinstance(artifact, dict) else None
    if not isinstance(abi, list):
        raise ConfigurationError(
            f"Contract artifact has no ABI: {artifact_path}",
            context={"path": str(artifact_path)}
        )

    return abi

"""JSON output for commands supporting --json."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rvm.cli.output import machine_output
from rvm.core.releases import Binary


class BinaryEntry(BaseModel):
    """One Resolc version in `rvm list --json` output.

    Attributes:
        version: Resolc version
        installed: Whether the binary is on disk
        path: Executable path for installed binaries, None otherwise
        solc_range: Supported solc versions, e.g. ">=0.8.0, <=0.8.29"
    """

    model_config = ConfigDict(strict=True)

    version: str
    installed: bool
    path: str | None
    solc_range: str

    @staticmethod
    def from_binary(binary: Binary) -> "BinaryEntry":
        path = binary.local_path()
        return BinaryEntry(
            version=binary.version,
            installed=binary.is_local,
            path=str(path) if path is not None else None,
            solc_range=binary.info.solc_range,
        )


class ListCommandResponse(BaseModel):
    """JSON response schema for the `rvm list` command.

    Attributes:
        default: Default Resolc version, None if unset
        versions: Every known version, sorted
    """

    model_config = ConfigDict(strict=True)

    default: str | None
    versions: list[BinaryEntry] = Field(default_factory=list)


def emit_json(data: dict[str, Any]) -> None:
    """Write JSON to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode="json") first.
    """
    machine_output(json.dumps(data, indent=2))

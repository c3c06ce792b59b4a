"""
Serialization boundary for the pickup component.

Parses host input into component models and serializes results back to the
host's output shape. Malformed input is rejected here; the component itself
only ever sees structurally valid input.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from local_pickup.api.schemas import FunctionInputModel, FunctionRunResultModel
from local_pickup.components.pickup import (
    FunctionInput,
    FunctionRunResult,
    PickupConfig,
    run,
)


class InputParseError(ValueError):
    """Raised when host input does not match the function input schema."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid function input: {'; '.join(errors)}")


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def parse_input(payload: Mapping[str, Any] | str | bytes) -> FunctionInput:
    """
    Parse host input (JSON text or decoded object) into a FunctionInput.

    Raises:
        InputParseError: payload is not UTF-8, not valid JSON, or violates the schema
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputParseError([f"<root>: input is not valid UTF-8 ({e.reason})"]) from e

    try:
        if isinstance(payload, str):
            model = FunctionInputModel.model_validate_json(payload)
        else:
            model = FunctionInputModel.model_validate(payload)
    except ValidationError as e:
        raise InputParseError(_format_errors(e)) from e

    return model.to_domain()


def serialize_result(result: FunctionRunResult) -> dict[str, Any]:
    """Serialize a result to the host output shape (JSON-safe)."""
    return FunctionRunResultModel.from_domain(result).model_dump(mode="json")


def run_serialized(
    payload: Mapping[str, Any] | str | bytes,
    config: PickupConfig | None = None,
) -> dict[str, Any]:
    """Parse, evaluate and serialize in one call."""
    return serialize_result(run(parse_input(payload), config))

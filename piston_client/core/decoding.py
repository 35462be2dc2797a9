#piston_client\core\decoding.py
"""Decode raw API payloads into value types.

Absent optional keys and explicit ``null`` both decode to ``None``.
Absent required keys raise ``DecodeError`` instead of leaking ``None``
into fields typed as ``str``.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Type

from piston_client.core.errors import DecodeError
from piston_client.core.models import ExecutionResults, ExecutionStepDetails, Runtime


def _check_type(key: str, value: Any, type_: Type) -> Any:
    # bool is a subclass of int; the API never sends booleans for numeric fields
    if type_ is int and isinstance(value, bool):
        raise DecodeError(f"'{key}' must be int, got bool")

    if not isinstance(value, type_):
        raise DecodeError(
            f"'{key}' must be {type_.__name__}, got {type(value).__name__}"
        )

    return value


def _check_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DecodeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def required(data: Mapping[str, Any], key: str, type_: Type) -> Any:
    """Return ``data[key]``; fail if it is absent, null or of the wrong type."""
    value = data.get(key)
    if value is None:
        raise DecodeError(f"'{key}' is required")
    return _check_type(key, value, type_)


def optional(data: Mapping[str, Any], key: str, type_: Type) -> Optional[Any]:
    """Return ``data[key]`` or ``None`` when it is absent or null."""
    value = data.get(key)
    if value is None:
        return None
    return _check_type(key, value, type_)


# -------------------------
# Runtimes
# -------------------------

def decode_runtime(data: Any) -> Runtime:
    data = _check_mapping(data, "runtime")

    aliases = optional(data, "aliases", list) or []
    for alias in aliases:
        _check_type("aliases[]", alias, str)

    return Runtime(
        language=required(data, "language", str),
        version=required(data, "version", str),
        aliases=tuple(aliases),
        runtime=optional(data, "runtime", str),
    )


def decode_runtimes(data: Any) -> List[Runtime]:
    if not isinstance(data, list):
        raise DecodeError(f"runtimes must be a JSON array, got {type(data).__name__}")

    return [decode_runtime(item) for item in data]


# -------------------------
# Execution
# -------------------------

def decode_step_details(data: Any) -> ExecutionStepDetails:
    data = _check_mapping(data, "step details")

    return ExecutionStepDetails(
        stdout=required(data, "stdout", str),
        stderr=required(data, "stderr", str),
        output=required(data, "output", str),
        code=optional(data, "code", int),
        signal=optional(data, "signal", str),
        message=optional(data, "message", str),
        status=optional(data, "status", str),
        cpu_time=optional(data, "cpu_time", int),
        wall_time=optional(data, "wall_time", int),
        memory=optional(data, "memory", int),
    )


def decode_execution_results(data: Any) -> ExecutionResults:
    data = _check_mapping(data, "execution results")

    compile_data = data.get("compile")

    return ExecutionResults(
        language=required(data, "language", str),
        version=required(data, "version", str),
        run=decode_step_details(required(data, "run", Mapping)),
        compile=decode_step_details(compile_data) if compile_data is not None else None,
    )


class ResultDecoder:
    @staticmethod
    def runtimes(data: Any) -> List[Runtime]:
        return decode_runtimes(data)

    @staticmethod
    def execution_results(data: Any) -> ExecutionResults:
        return decode_execution_results(data)


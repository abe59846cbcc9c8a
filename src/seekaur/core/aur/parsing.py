"""Parsing helpers for AUR RPC JSON bodies."""

import json
from datetime import UTC, datetime
from typing import Any

from seekaur.core.aur.errors import DecodeError, RpcError
from seekaur.core.aur.types import AurPackage, RpcResponse

# CategoryID stopped being sent by newer servers; treat its absence as "none"
DEFAULT_CATEGORY_ID = 1


def decode_timestamp(value: Any) -> datetime:
    """Decode an epoch-seconds integer into a UTC-aware datetime.

    The AUR encodes FirstSubmitted and LastModified as bare integers rather
    than RFC 3339 strings. Only a JSON integer is accepted; strings (including
    ISO-8601 dates), floats, booleans and null are rejected.

    Args:
        value: Scalar as produced by json.loads

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        DecodeError: If value is not an integer

    Example:
        >>> decode_timestamp(1350939768)
        datetime.datetime(2012, 10, 22, 21, 2, 48, tzinfo=datetime.timezone.utc)
    """
    # bool is a subclass of int but `true` is not an integer token
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Invalid timestamp {value!r}: expected integer epoch seconds")
    try:
        return datetime.fromtimestamp(value, UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"Timestamp {value} is out of range") from e


def _field(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, expected):
        raise DecodeError(f"Field {key!r} has unexpected value {value!r}")
    return value


def parse_package(data: Any) -> AurPackage:
    """Build an AurPackage from one element of the RPC ``results`` array.

    Missing optional fields take their zero value. Maintainer stays None when
    the package is orphaned. OutOfDate is normalized to a bool.

    Raises:
        DecodeError: If the record is not an object, a field has the wrong
            type, or a timestamp is missing or malformed
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Expected package object, got {type(data).__name__}")

    maintainer = data.get("Maintainer")
    if maintainer is not None and not isinstance(maintainer, str):
        raise DecodeError(f"Field 'Maintainer' has unexpected value {maintainer!r}")

    for key in ("FirstSubmitted", "LastModified"):
        if key not in data:
            raise DecodeError(f"Package record is missing {key!r}")

    return AurPackage(
        maintainer=maintainer,
        id=_field(data, "ID", int, 0),
        name=_field(data, "Name", str, ""),
        version=_field(data, "Version", str, ""),
        category_id=_field(data, "CategoryID", int, DEFAULT_CATEGORY_ID),
        description=_field(data, "Description", str, ""),
        url=_field(data, "URL", str, ""),
        license=_field(data, "License", str, ""),
        num_votes=_field(data, "NumVotes", int, 0),
        out_of_date=bool(data.get("OutOfDate")),
        first_submitted=decode_timestamp(data["FirstSubmitted"]),
        last_modified=decode_timestamp(data["LastModified"]),
        url_path=_field(data, "URLPath", str, ""),
    )


def parse_rpc_response(body: str) -> RpcResponse:
    """Parse a JSON RPC body into an RpcResponse.

    Args:
        body: Raw response text

    Returns:
        RpcResponse whose results keep the server's ordering

    Raises:
        DecodeError: If the body is not JSON or not a valid envelope
        RpcError: If the envelope has type "error"
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Expected JSON object envelope, got {type(data).__name__}")

    response_type = _field(data, "type", str, "")
    results = data.get("results")

    if response_type == "error":
        message = data.get("error") or results or "unknown error"
        raise RpcError(str(message))

    if results is None:
        results = []
    if not isinstance(results, list):
        raise DecodeError(f"Expected 'results' to be a list, got {type(results).__name__}")

    return RpcResponse(
        type=response_type,
        count=_field(data, "count", int, 0),
        results=tuple(parse_package(item) for item in results),
    )

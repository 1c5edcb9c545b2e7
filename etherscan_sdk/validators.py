"""Field-level input checks used by the endpoint modules.

Each helper raises :class:`ValidationError` before any request is built.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from etherscan_sdk.exceptions import ValidationError

_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")
_TX_HASH_PATTERN = re.compile(r"^0x[a-fA-F0-9]{64}$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SORT_DIRECTIONS = ("asc", "desc")
TOPIC_OPERATORS = ("and", "or")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_required(params: Mapping[str, Any], required: Iterable[str]) -> None:
    for name in required:
        value = params.get(name)
        if value is None or value == "":
            raise ValidationError(f"Missing required parameter: {name}")


def validate_address(address: Any) -> str:
    if not isinstance(address, str) or not _ADDRESS_PATTERN.match(address):
        raise ValidationError(f"Invalid Ethereum address format: {address}")
    return address


def validate_addresses(addresses: Any, limit: int | None = None, label: str = "Addresses") -> list[str]:
    """Validate a non-empty list of addresses, optionally capped at ``limit``."""
    if isinstance(addresses, str) or not isinstance(addresses, (list, tuple)) or not addresses:
        raise ValidationError(f"{label} must be a non-empty list")
    if limit is not None and len(addresses) > limit:
        raise ValidationError(f"{label} must contain at most {limit} entries")
    return [validate_address(a) for a in addresses]


def validate_tx_hash(txhash: Any) -> str:
    if not isinstance(txhash, str) or not _TX_HASH_PATTERN.match(txhash):
        raise ValidationError(f"Invalid transaction hash format: {txhash}")
    return txhash


def validate_block_number(block_number: Any) -> int:
    if not _is_int(block_number) or block_number < 0:
        raise ValidationError(f"Invalid block number: {block_number}. Must be a positive integer.")
    return block_number


def validate_block_range(start_block: int | None, end_block: int | None) -> None:
    if start_block is not None:
        validate_block_number(start_block)
    if end_block is not None:
        validate_block_number(end_block)
    if start_block is not None and end_block is not None and start_block > end_block:
        raise ValidationError("Start block must be less than or equal to end block")


def validate_positive_int(value: Any, name: str, allow_zero: bool = False) -> int:
    if not _is_int(value) or value < 0 or (value == 0 and not allow_zero):
        raise ValidationError(f"{name} must be a positive integer")
    return value


def validate_hex_data(data: Any, name: str = "data") -> str:
    if not isinstance(data, str) or not data.startswith("0x"):
        raise ValidationError(f"Invalid {name} string: must start with '0x'")
    return data


def validate_date(value: Any) -> str:
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise ValidationError("Dates must be in YYYY-MM-DD format")
    return value


def validate_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    if value not in choices:
        options = " or ".join(f"'{c}'" for c in choices)
        raise ValidationError(f"{name} must be {options}")
    return value


def validate_sort(sort: Any) -> str:
    return validate_choice(sort, SORT_DIRECTIONS, "Sort")


def format_param(value: Any, kind: Literal["boolean", "string", "number"] = "string") -> str | int | float:
    """Render a value the way the API expects it on the query string."""
    if value is None:
        return ""
    if kind == "boolean":
        return "1" if value else "0"
    if kind == "number":
        number = float(value)
        return int(number) if number.is_integer() else number
    return str(value)

"""Render a ServiceResult for the terminal.

Human mode prints ``OK: op`` followed by one ``key: value`` line per data
field; lists of records (carts, products, customers) get one compact JSON
line per record. ``--json`` prints the whole result model.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storefront.services.result import ServiceResult


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=str)


def _data_lines(data: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            lines.append(f"  {key}:")
            lines.extend(f"    - {_compact(record)}" for record in value)
        elif isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_compact(value)}")
        else:
            lines.append(f"  {key}: {value}")
    return lines


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        if result.error is None:
            return f"ERROR: {result.op} - Unknown error"
        return f"ERROR: {result.op} [{result.error.code}] - {result.error.message}"
    return "\n".join([f"OK: {result.op}", *_data_lines(result.data)])

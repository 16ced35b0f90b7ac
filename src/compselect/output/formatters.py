"""Human/JSON output helpers for ServiceResult."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from compselect.services.result import ServiceResult


def _format_rules(data: dict[str, Any]) -> list[str]:
    lines = [f"  {data['count']} rule(s)"]
    for rule in data["rules"]:
        lines.append(f"  [{rule['index']}] {rule['target']} -> {rule['action']}")
    return lines


def _format_candidates(data: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    for item in data["candidates"]:
        if item["rejected"]:
            lines.append(f"  REJECTED {item['candidate']}: {item['reason']}")
        else:
            matched = item["matching_rules"]
            lines.append(f"  ACCEPTED {item['candidate']} ({matched} rule(s) matched)")
    lines.append(f"  accepted={data['accepted']} rejected={data['rejected']}")
    return lines


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {error_msg}"

    parts = [f"OK: {result.op}"]
    if "rules" in result.data:
        parts.extend(_format_rules(result.data))
    elif "candidates" in result.data:
        parts.extend(_format_candidates(result.data))
    return "\n".join(parts)

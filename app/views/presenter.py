"""Plain-text rendering of processing results for people."""

from __future__ import annotations

from typing import Any, Dict, List

from app.domain.enums import ProcessingSource


def _count(result: Dict[str, Any], key: str) -> int:
    return len(result.get(key) or [])


def render_summary(result: Dict[str, Any], source: ProcessingSource) -> str:
    """Summarize a ``/process`` payload, whichever side computed it."""
    odd = _count(result, "odd_numbers")
    even = _count(result, "even_numbers")

    lines: List[str] = [f"Processed with: {source.label}"]
    if result.get("is_success"):
        lines.append("Status: Success")
    else:
        lines.append(f"Status: Failed ({result.get('error') or 'unknown error'})")
    lines.extend(
        [
            f"Numbers: {odd + even} total ({odd} odd, {even} even)",
            f"Alphabets: {_count(result, 'alphabets')}",
            f"Special Characters: {_count(result, 'special_characters')}",
            f"Sum: {result.get('sum') or '0'}",
            f"Concatenated: {result.get('concat_string') or ''}",
        ]
    )
    return "\n".join(lines)

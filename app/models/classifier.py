"""Token classification and aggregation (the processing core).

``classify`` is shared by the Flask view and the client-side fallback, so both
paths always agree on the result for a given payload.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from app.domain.enums import TokenCategory
from app.domain.errors import InvalidInputKindError
from app.models.schemas import ClassificationResult

logger = logging.getLogger(__name__)

_NUMERIC_PATTERN = re.compile(r"[0-9]+")
_LETTER_PATTERN = re.compile(r"[A-Za-z]")

INTERNAL_ERROR_MESSAGE = "Internal error"

# ECMAScript WhiteSpace and LineTerminator, so tokens trim the same as in browsers.
_TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Digits per int/str conversion step, below the interpreter's conversion limit.
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


def digits_to_int(digits: str) -> int:
    """Parse an ASCII digit string of any length."""
    number = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        number = number * 10 ** len(chunk) + int(chunk)
    return number


def int_to_digits(number: int) -> str:
    """Render a non-negative integer of any size in decimal."""
    if number < _CHUNK_BASE:
        return str(number)
    chunks: List[int] = []
    while number:
        number, chunk = divmod(number, _CHUNK_BASE)
        chunks.append(chunk)
    head = str(chunks.pop())
    return head + "".join(str(chunk).zfill(_CHUNK_DIGITS) for chunk in reversed(chunks))


def token_text(value: Any) -> str:
    """Render a decoded JSON value the way it appears in JSON text, trimmed."""
    if isinstance(value, str):
        text = value
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif value is None:
        text = "null"
    elif isinstance(value, int):
        text = ("-" if value < 0 else "") + int_to_digits(abs(value))
    elif isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        text = str(int(value))
    elif isinstance(value, (list, tuple, dict)):
        text = json.dumps(value, separators=(",", ":"))
    else:
        text = str(value)
    return text.strip(_TRIM_CHARACTERS)


def categorize_token(text: str) -> Optional[TokenCategory]:
    """Return the category of a trimmed token, or ``None`` when it is empty."""
    if not text:
        return None
    if _NUMERIC_PATTERN.fullmatch(text):
        return TokenCategory.NUMERIC
    if _LETTER_PATTERN.fullmatch(text):
        return TokenCategory.LETTER
    return TokenCategory.SPECIAL


def letter_sort_key(letter: str) -> Tuple[int, str]:
    """Uppercase before lowercase, then code-point order."""
    return (0 if letter.isupper() else 1, letter)


def _extract_tokens(payload: Any) -> List[Any]:
    if not isinstance(payload, Mapping):
        raise InvalidInputKindError("Input must be a JSON object")
    data = payload.get("data", [])
    if not isinstance(data, (list, tuple)):
        raise InvalidInputKindError("Input data must be an array")
    return list(data)


def _aggregate(tokens: List[Any]) -> ClassificationResult:
    odd_numbers: List[str] = []
    even_numbers: List[str] = []
    letters: List[str] = []
    specials: List[str] = []
    total = 0

    for token in tokens:
        text = token_text(token)
        category = categorize_token(text)
        if category is None:
            continue
        if category is TokenCategory.NUMERIC:
            canonical = text.lstrip("0") or "0"
            total += digits_to_int(canonical)
            is_odd = int(canonical[-1]) % 2
            (odd_numbers if is_odd else even_numbers).append(canonical)
        elif category is TokenCategory.LETTER:
            letters.append(text)
        else:
            specials.append(text)

    alphabets = sorted(letters, key=letter_sort_key)
    return ClassificationResult(
        is_success=True,
        odd_numbers=odd_numbers,
        even_numbers=even_numbers,
        alphabets=alphabets,
        special_characters=specials,
        sum=int_to_digits(total),
        concat_string="".join(alphabets),
    )


def classify(payload: Any, *, debug: bool = False) -> ClassificationResult:
    """Classify ``payload["data"]`` into odd/even numbers, letters and specials.

    Never raises: structural problems and unexpected faults come back as
    failure results. With ``debug`` the failure message for unexpected faults
    includes the exception text.
    """
    try:
        tokens = _extract_tokens(payload)
        return _aggregate(tokens)
    except InvalidInputKindError as exc:
        logger.info("Rejected input: %s", exc)
        return ClassificationResult.failure(str(exc))
    except Exception as exc:
        logger.exception("Classification failed: %s", exc)
        message = f"{INTERNAL_ERROR_MESSAGE}: {exc}" if debug else INTERNAL_ERROR_MESSAGE
        return ClassificationResult.failure(message)

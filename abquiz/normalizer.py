# abquiz/normalizer.py
# Turns raw model text into a ScoreMap in which every requested pair sums to 100.

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .errors import ParseError
from .models import ScoreMap
from .prompt import split_pair

logger = logging.getLogger(__name__)

FENCE_OPEN_RE = re.compile(r'^```[\w+-]*')
FENCE_CLOSE_RE = re.compile(r'```$')

SUM_TOLERANCE = 0.1
NEUTRAL_SCORE = 50.0


@dataclass(frozen=True)
class Parsed:
    value: Any


@dataclass(frozen=True)
class ExtractedSubstring:
    value: Any
    text: str


@dataclass(frozen=True)
class Failed:
    reason: str


ParseResult = Union[Parsed, ExtractedSubstring, Failed]


def strip_code_fences(text: str) -> str:
    """Remove a wrapping ``` / ```json fence and surrounding whitespace."""
    text = (text or '').strip()
    text = FENCE_OPEN_RE.sub('', text, count=1)
    text = FENCE_CLOSE_RE.sub('', text, count=1)
    return text.strip()


def extract_object_text(text: str) -> Optional[str]:
    """
    Return the first brace-delimited substring whose braces balance,
    ignoring braces inside JSON strings. None if there is no such substring.
    """
    start = text.find('{')
    if start == -1:
        return None

    depth = 0
    in_str = False
    esc = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_str:
            if esc:
                esc = False
            elif ch == '\\':
                esc = True
            elif ch == '"':
                in_str = False
            continue
        if ch == '"':
            in_str = True
        elif ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def parse_score_object(raw_text: str) -> ParseResult:
    """
    Run the fallback chain: direct parse of the de-fenced text, then parse
    of the first balanced {...} substring. A direct parse that is not an
    object (e.g. a list wrapping one) falls through to the substring step.
    """
    cleaned = strip_code_fences(raw_text)
    try:
        value = json.loads(cleaned)
        if isinstance(value, dict):
            return Parsed(value)
    except (ValueError, RecursionError):
        pass

    candidate = extract_object_text(cleaned)
    if candidate is None:
        return Failed('no JSON object found')
    try:
        return ExtractedSubstring(json.loads(candidate), candidate)
    except (ValueError, RecursionError):
        return Failed('no JSON object found')


def _is_score(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def validate_scores(obj: Any) -> Dict[str, float]:
    """Require a flat mapping of string keys to finite numbers."""
    if not isinstance(obj, dict):
        raise ParseError('invalid score shape: expected a JSON object')
    for key, value in obj.items():
        if not _is_score(value):
            raise ParseError(f'invalid score shape: {key!r} is not a number')
    return {key: float(value) for key, value in obj.items()}


def balance_pair(left: Optional[float], right: Optional[float]) -> Tuple[float, float]:
    """
    Fill in missing sides and rescale so left + right is 100.0 within tolerance.

    The complement is taken from the rounded left value, so a rescaled pair
    can still be off by less than 0.1 after rounding.
    """
    if left is None and right is None:
        return NEUTRAL_SCORE, NEUTRAL_SCORE
    if right is None:
        right = 100.0 - left
    elif left is None:
        left = 100.0 - right

    total = left + right
    if total == 0:
        return NEUTRAL_SCORE, NEUTRAL_SCORE
    if abs(total - 100.0) > SUM_TOLERANCE:
        left = round(left / total * 100, 1)
        right = round(100 - left, 1)
    return float(left), float(right)


def normalize_scores(raw_text: str, characteristics: Sequence[str]) -> ScoreMap:
    """
    Convert raw model text into a ScoreMap covering exactly the labels of
    the requested characteristic pairs.

    Raises:
        ParseError: no JSON object could be recovered, or it is not a flat
            mapping of numbers.
    """
    result = parse_score_object(raw_text)
    if isinstance(result, Failed):
        logger.warning(f"Could not parse model reply: {result.reason}")
        raise ParseError(result.reason)
    if isinstance(result, ExtractedSubstring):
        logger.info("Model reply was not bare JSON; used first embedded object")

    parsed = validate_scores(result.value)

    scores: ScoreMap = {}
    for pair in characteristics:
        left_label, right_label = split_pair(pair)
        left, right = balance_pair(parsed.get(left_label), parsed.get(right_label))
        scores[left_label] = left
        scores[right_label] = right

    dropped = set(parsed) - set(scores)
    if dropped:
        logger.debug(f"Dropped unrequested score keys: {sorted(dropped)}")
    return scores

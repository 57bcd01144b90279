# core/strength_utils.py
from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from core.logger import get_logger

log = get_logger(__name__)

MIN_LENGTH = 8
GOOD_LENGTH = 12
COMMON_PATTERNS: Tuple[str, ...] = ("123", "abc", "password", "qwerty")

MSG_TOO_SHORT = "Password should be at least 8 characters long."
MSG_NO_UPPER = "Consider adding uppercase letters."
MSG_NO_LOWER = "Consider adding lowercase letters."
MSG_NO_DIGIT = "Consider adding numbers."
MSG_NO_SYMBOL = "Consider adding symbols."
MSG_REPEATED = "Avoid repeating the same character three or more times in a row."
MSG_COMMON = "Avoid common patterns such as '123', 'abc', 'password' or 'qwerty'."
MSG_EXCELLENT = "Excellent password!"

_VARIETY = (
    (re.compile(r"[A-Z]"), MSG_NO_UPPER),
    (re.compile(r"[a-z]"), MSG_NO_LOWER),
    (re.compile(r"[0-9]"), MSG_NO_DIGIT),
    (re.compile(r"[^A-Za-z0-9]"), MSG_NO_SYMBOL),
)
_REPEAT = re.compile(r"(.)\1{2,}")


class StrengthLevel(str, Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

# inclusive lower bounds, highest first
_LEVELS = (
    (90, StrengthLevel.VERY_STRONG),
    (75, StrengthLevel.STRONG),
    (60, StrengthLevel.GOOD),
    (40, StrengthLevel.FAIR),
    (20, StrengthLevel.WEAK),
)


@dataclass(frozen=True)
class StrengthReport:
    score: int
    level: StrengthLevel
    feedback: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "feedback": list(self.feedback),
        }


def strength_label(score: int) -> StrengthLevel:
    for threshold, level in _LEVELS:
        if score >= threshold:
            return level
    return StrengthLevel.VERY_WEAK

def count_repeats(password: str) -> int:
    """Number of non-overlapping runs of 3+ identical characters."""
    return sum(1 for _ in _REPEAT.finditer(password))

def has_common_pattern(password: str) -> bool:
    lowered = password.lower()
    return any(p in lowered for p in COMMON_PATTERNS)


def analyze(password: str) -> StrengthReport:
    score = 0
    feedback: List[str] = []

    if len(password) >= GOOD_LENGTH:
        score += 25
    elif len(password) >= MIN_LENGTH:
        score += 15
    else:
        feedback.append(MSG_TOO_SHORT)

    for pattern, missing_msg in _VARIETY:
        if pattern.search(password):
            score += 15
        else:
            feedback.append(missing_msg)

    repeats = count_repeats(password)
    if repeats:
        score -= repeats * 10
        feedback.append(MSG_REPEATED)

    if has_common_pattern(password):
        score -= 20
        feedback.append(MSG_COMMON)

    score = max(0, min(100, score))
    level = strength_label(score)

    if not feedback:
        feedback.append(MSG_EXCELLENT)

    log.debug("analyzed password: length=%d score=%d level=%s", len(password), score, level.value)
    return StrengthReport(score=score, level=level, feedback=tuple(feedback))

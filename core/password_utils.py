# core/password_utils.py
from __future__ import annotations
import string
from dataclasses import dataclass
from typing import Dict, List, Tuple

from core.errors import ConfigurationError, EmptyCharsetError
from core.logger import get_logger
from core.random_utils import RandomSource, resolve

log = get_logger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Characters often confused visually
SIMILAR_CHARS = "il1Lo0O"
_SIMILAR = frozenset(SIMILAR_CHARS)

MEMORABLE_WORDS: Tuple[str, ...] = (
    "Apple", "Ocean", "Mountain", "River", "Forest", "Cloud",
    "Storm", "Fire", "Stone", "Bridge", "Castle", "Garden",
    "Music", "Dance", "Dream", "Light", "Shadow", "Moon",
    "Star", "Wind", "Rain", "Snow", "Thunder", "Lightning",
)
MEMORABLE_SYMBOLS = "!@#$%"
MEMORABLE_SEPARATOR = "-"


@dataclass(frozen=True)
class CharacterClassConfig:
    length: int = 16
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_symbols: bool = True
    exclude_similar: bool = False
    custom_chars: str = ""


PRESETS: Dict[str, CharacterClassConfig] = {
    "Standard (16)": CharacterClassConfig(length=16, exclude_similar=True),
    "Simple (8, no symbols)": CharacterClassConfig(length=8, use_symbols=False),
    "Complex (24)": CharacterClassConfig(length=24, exclude_similar=True),
}


def filter_similar(charset: str) -> str:
    return "".join(c for c in charset if c not in _SIMILAR)

def random_char(charset: str, rng: RandomSource | None = None) -> str:
    if not charset:
        raise EmptyCharsetError("Cannot draw a character from an empty pool.")
    return charset[resolve(rng).randbelow(len(charset))]

def shuffle(chars: str, rng: RandomSource | None = None) -> str:
    """Fisher-Yates: walk from the last index down to 1, swap with j in [0, i]."""
    rng = resolve(rng)
    arr = list(chars)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return "".join(arr)


def build_pools(config: CharacterClassConfig) -> Tuple[List[str], str]:
    """
    Returns (groups, combined) where:
      - groups: one pool per enabled class, in order upper, lower, digits, symbols
      - combined: all groups followed by the custom characters
    """
    groups: List[str] = []
    for enabled, charset in (
        (config.use_upper, UPPERCASE),
        (config.use_lower, LOWERCASE),
        (config.use_digits, DIGITS),
        (config.use_symbols, SYMBOLS),
    ):
        if not enabled:
            continue
        groups.append(filter_similar(charset) if config.exclude_similar else charset)

    custom = config.custom_chars or ""
    if config.exclude_similar:
        custom = filter_similar(custom)

    return groups, "".join(groups) + custom

def validate(config: CharacterClassConfig) -> Tuple[List[str], str]:
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ConfigurationError(f"Length must be a positive integer, got {length!r}.")

    groups, combined = build_pools(config)
    if not combined:
        raise ConfigurationError("No character source selected.")
    if length < len(groups):
        raise ConfigurationError(
            f"Length ({length}) is too short for {len(groups)} required character classes."
        )
    return groups, combined


def generate(config: CharacterClassConfig, rng: RandomSource | None = None) -> str:
    """
    Generate a password of config.length with at least one character from
    every enabled class. Custom characters join the pool but get no
    guaranteed slot.
    """
    rng = resolve(rng)
    groups, combined = validate(config)

    guaranteed = [random_char(grp, rng) for grp in groups]
    filled = [random_char(combined, rng) for _ in range(config.length - len(guaranteed))]

    log.debug("generated password: length=%d classes=%d pool=%d",
              config.length, len(groups), len(combined))
    return shuffle("".join(guaranteed + filled), rng)

def generate_many(config: CharacterClassConfig, count: int,
                  rng: RandomSource | None = None) -> List[str]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ConfigurationError(f"Count must be a non-negative integer, got {count!r}.")
    return [generate(config, rng) for _ in range(count)]

def generate_memorable(word_count: int = 4, rng: RandomSource | None = None) -> str:
    """Words-joined-by-hyphens + a number in [10, 99] + one symbol, e.g. Moon-Rain-Fire-Star42#."""
    if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count < 1:
        raise ConfigurationError(f"Word count must be a positive integer, got {word_count!r}.")

    rng = resolve(rng)
    words = [MEMORABLE_WORDS[rng.randbelow(len(MEMORABLE_WORDS))] for _ in range(word_count)]
    number = 10 + rng.randbelow(90)
    symbol = random_char(MEMORABLE_SYMBOLS, rng)

    log.debug("generated memorable passphrase: words=%d", word_count)
    return f"{MEMORABLE_SEPARATOR.join(words)}{number}{symbol}"

"""passmint -- password generation with a strength indicator.

Core functions for assembling constrained random passwords and scoring
their strength.  Presentation layers (CLI, Streamlit page) live elsewhere
and only call into this module.
"""

import logging
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)


# ── Settings ───────────────────────────────────────────────────────────────

MIN_LENGTH = 4
MAX_LENGTH = 32
DEFAULT_LENGTH = 16
REVEAL_STAGGER_MS = 20


def clamp_length(value, minimum: int = MIN_LENGTH, maximum: int = MAX_LENGTH) -> int:
    """Parse *value* as a length and clamp it into ``[minimum, maximum]``.

    Anything that does not parse as an integer resets to *minimum*.
    """
    try:
        length = int(value)
    except (TypeError, ValueError):
        return minimum
    return max(minimum, min(length, maximum))


# ── Character categories ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Category:
    name: str
    alphabet: str

    def effective_alphabet(self, exclude_ambiguous: bool = False) -> str:
        if not exclude_ambiguous:
            return self.alphabet
        return "".join(ch for ch in self.alphabet if ch not in AMBIGUOUS_CHARS)


AMBIGUOUS_CHARS = "lI1O0o"

# Iteration order is the order guaranteed characters are drawn in.
CATEGORIES = {
    c.name: c
    for c in (
        Category("uppercase", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
        Category("lowercase", "abcdefghijklmnopqrstuvwxyz"),
        Category("numbers", "0123456789"),
        Category("symbols", "!@#$%^&*()_+~`|}{[]:;?><,./-="),
    )
}


class NoPassword(str, Enum):
    """Terminal outcomes shown in place of a password."""

    NO_SELECTION = "Select an option"
    NO_CHARACTERS = "No available characters."

    def __str__(self) -> str:
        return self.value


class RandomSource(Protocol):
    def random(self) -> float: ...


_default_rng = random.SystemRandom()


@dataclass(frozen=True)
class GenerationRequest:
    categories: frozenset
    exclude_ambiguous: bool = False
    length: int = DEFAULT_LENGTH

    @classmethod
    def from_settings(
        cls,
        categories: Iterable[str],
        exclude_ambiguous: bool = False,
        length=DEFAULT_LENGTH,
        *,
        minimum: int = MIN_LENGTH,
        maximum: int = MAX_LENGTH,
    ) -> "GenerationRequest":
        """Build a request from raw UI state, clamping the length."""
        selected = frozenset(categories)
        _check_categories(selected)
        return cls(selected, bool(exclude_ambiguous), clamp_length(length, minimum, maximum))

    def assemble(self, rng: RandomSource | None = None) -> "str | NoPassword":
        return assemble(self.categories, self.exclude_ambiguous, self.length, rng=rng)


def _check_categories(names) -> None:
    unknown = set(names) - CATEGORIES.keys()
    if unknown:
        raise ValueError(f"Unknown character categories: {', '.join(sorted(unknown))}")


# ── Password assembly ──────────────────────────────────────────────────────


def _pick(rng: RandomSource, n: int) -> int:
    return int(rng.random() * n)


def assemble(
    categories: Iterable[str],
    exclude_ambiguous: bool = False,
    length: int = DEFAULT_LENGTH,
    *,
    rng: RandomSource | None = None,
) -> "str | NoPassword":
    """Assemble a random password from the selected character categories.

    One character is drawn from every selected category whose effective
    alphabet is non-empty, the rest are drawn from the combined pool, and
    the whole is shuffled.  Alphabets are concatenated rather than merged,
    so a character shared by two categories is twice as likely in the fill.

    If *length* is smaller than the number of guaranteed characters the
    shuffled result is cut down to *length*.

    Returns a :class:`NoPassword` outcome when nothing is selected or every
    selected alphabet is empty after exclusion.
    """
    selected = set(categories)
    _check_categories(selected)
    if not selected:
        logger.debug("No character categories selected")
        return NoPassword.NO_SELECTION

    rng = rng or _default_rng

    alphabets = [
        a
        for a in (
            c.effective_alphabet(exclude_ambiguous)
            for name, c in CATEGORIES.items()
            if name in selected
        )
        if a
    ]
    if not alphabets:
        logger.debug("No characters left after excluding ambiguous ones")
        return NoPassword.NO_CHARACTERS

    pool = "".join(alphabets)
    chars = [a[_pick(rng, len(a))] for a in alphabets]
    chars += [pool[_pick(rng, len(pool))] for _ in range(length - len(chars))]

    # Fisher-Yates shuffle
    for i in range(len(chars) - 1, 0, -1):
        j = _pick(rng, i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars[: max(length, 0)])


# ── Strength scoring ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class StrengthLevel:
    points: int
    label: str
    fill_percent: int
    color: str


STRENGTH_LEVELS = {
    level.points: level
    for level in (
        StrengthLevel(-1, "Empty", 0, "#9ca3af"),
        StrengthLevel(0, "Very Weak", 10, "#b91c1c"),
        StrengthLevel(1, "Very Weak", 20, "#dc2626"),
        StrengthLevel(2, "Weak", 35, "#ef4444"),
        StrengthLevel(3, "Medium", 50, "#f97316"),
        StrengthLevel(4, "Medium", 65, "#eab308"),
        StrengthLevel(5, "Strong", 80, "#22c55e"),
        StrengthLevel(6, "Very Strong", 90, "#16a34a"),
        StrengthLevel(7, "Excellent", 100, "#15803d"),
    )
}

EMPTY = STRENGTH_LEVELS[-1]

_CHECKS = [
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
]


def score(password: "str | NoPassword | None") -> StrengthLevel:
    """Classify *password* into one of the nine strength levels.

    One point each for length >= 8, >= 12 and >= 16, and one per
    character class present (lowercase, uppercase, digit, other).
    Missing passwords and :class:`NoPassword` outcomes are ``Empty``.
    """
    if not password or isinstance(password, NoPassword) or password == NoPassword.NO_SELECTION.value:
        return EMPTY

    length = len(password)
    points = sum(length >= n for n in (8, 12, 16))
    points += sum(bool(rx.search(password)) for rx in _CHECKS)
    return STRENGTH_LEVELS.get(points, EMPTY)

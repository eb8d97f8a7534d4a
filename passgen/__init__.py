"""PassGen -- random password generation with a coarse strength estimate.

Core functions for building the character alphabet, generating passwords,
scoring their strength, and keeping a short history of saved passwords.
"""

import dataclasses
import re
import secrets
import string


# ── Configuration ──────────────────────────────────────────────────────────

DEFAULT_LENGTH = 12
MIN_LENGTH = 6
MAX_LENGTH = 100

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
FALLBACK_ALPHABET = string.ascii_uppercase + string.ascii_lowercase

HISTORY_LIMIT = 5

CHAR_CLASSES = ("uppercase", "lowercase", "digits", "symbols")

_CLASS_ALPHABETS = {
    "uppercase": string.ascii_uppercase,
    "lowercase": string.ascii_lowercase,
    "digits":    string.digits,
    "symbols":   SYMBOLS,
}


def clamp_length(length: int) -> int:
    """Clamp *length* into ``[MIN_LENGTH, MAX_LENGTH]``."""
    return max(MIN_LENGTH, min(MAX_LENGTH, int(length)))


@dataclasses.dataclass(frozen=True)
class GeneratorConfig:
    """Desired password length and the character classes to draw from."""

    length: int = DEFAULT_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True

    def __post_init__(self):
        object.__setattr__(self, "length", clamp_length(self.length))

    def replace(self, **changes) -> "GeneratorConfig":
        unknown = set(changes) - {"length", *CHAR_CLASSES}
        if unknown:
            raise ValueError(f"Unknown config field(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    def enabled_classes(self) -> list[str]:
        return [name for name in CHAR_CLASSES if getattr(self, name)]


# ── Password generation ────────────────────────────────────────────────────


def build_alphabet(config: GeneratorConfig) -> str:
    """Return the characters eligible for sampling under *config*.

    Enabled classes are concatenated in a fixed order (upper, lower, digits,
    symbols).  With every class disabled, letters only are used.
    """
    alphabet = "".join(_CLASS_ALPHABETS[name] for name in config.enabled_classes())
    return alphabet or FALLBACK_ALPHABET


def generate_password(config: GeneratorConfig | None = None) -> str:
    """Generate a random password for *config*.

    Every position is an independent uniform draw, with replacement, from
    :func:`build_alphabet`.  Repeated characters are allowed and no class is
    guaranteed to appear.
    """
    if config is None:
        config = GeneratorConfig()
    alphabet = build_alphabet(config)
    return "".join(secrets.choice(alphabet) for _ in range(config.length))


# ── Strength analysis ──────────────────────────────────────────────────────

MAX_SCORE = 7

# (highest score in band, label, colour band)
STRENGTH_BANDS = [
    (2, "Weak", "red"),
    (4, "Fair", "yellow"),
    (6, "Good", "blue"),
    (MAX_SCORE, "Strong", "green"),
]


def score_strength(password: str) -> dict:
    """Estimate password strength with a simple additive heuristic.

    One point each for length >= 8, >= 12 and >= 16, and one point for each
    character class present.  This is not an entropy measure.

    Returns a dict with keys:
        length       -- int
        char_classes -- dict[str, bool]  (lowercase, uppercase, digits, symbols)
        score        -- int 0-7
        label        -- str  (Weak, Fair, Good, Strong)
        color        -- str  (red, yellow, blue, green)
    """
    classes = {
        "lowercase": bool(re.search(r"[a-z]", password)),
        "uppercase": bool(re.search(r"[A-Z]", password)),
        "digits":    bool(re.search(r"[0-9]", password)),
        "symbols":   bool(re.search(r"[^a-zA-Z0-9]", password)),
    }

    score = sum(len(password) >= n for n in (8, 12, 16))
    score += sum(classes.values())

    for ceiling, label, color in STRENGTH_BANDS:
        if score <= ceiling:
            break

    return {
        "length": len(password),
        "char_classes": classes,
        "score": score,
        "label": label,
        "color": color,
    }


# ── History ────────────────────────────────────────────────────────────────


def push_history(history: list[str], password: str, limit: int = HISTORY_LIMIT) -> list[str]:
    """Return *history* with *password* saved at the front.

    Empty passwords and passwords already in the history are ignored.  The
    result never holds more than *limit* entries.
    """
    if not password or password in history:
        return list(history)
    return [password, *history][:limit]

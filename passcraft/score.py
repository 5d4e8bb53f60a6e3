"""
passcraft.score
Coarse password strength rating.

Two scoring policies are available and are kept separate:

- "composition": length bonus plus one point per character class present (0-6).
- "length": length bands only (1-3).

Both return a StrengthScore carrying the raw value, a label and the number of
filled blocks (out of TOTAL_BLOCKS) for a strength indicator.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict

from .errors import UnknownPolicy

TOTAL_BLOCKS = 4

# Symbols recognised when scoring. Not the same set the generator draws from:
# '?' and '/' are generated but not counted here.
SCORING_SYMBOLS = "!@#$%^&*()-_=+{};:,<.>"
_SYMBOL_RE = re.compile("[" + re.escape(SCORING_SYMBOLS) + "]")


@dataclass(frozen=True)
class StrengthScore:
    value: int
    label: str
    blocks: int
    policy: str

    def as_dict(self) -> dict:
        return {
            "score": self.value,
            "label": self.label,
            "blocks": self.blocks,
            "total_blocks": TOTAL_BLOCKS,
            "policy": self.policy,
        }


def composition_strength(password: str) -> int:
    strength = 0

    # --- Length ---
    length = len(password)
    if 8 <= length <= 12:
        strength += 1
    elif length > 12:
        strength += 2

    # --- Character variety ---
    if re.search(r"[a-z]", password):
        strength += 1
    if re.search(r"[A-Z]", password):
        strength += 1
    if re.search(r"[0-9]", password):
        strength += 1
    if _SYMBOL_RE.search(password):
        strength += 1

    return strength


def score_composition(password: str) -> StrengthScore:
    """
    Composition-weighted score.

    Label table (note it is not monotonic: 0 rates as Strong):
        1        -> Weak   (2 blocks)
        2        -> Medium (3 blocks)
        0, 3..6  -> Strong (4 blocks)
    """
    strength = composition_strength(password)
    if strength == 1:
        label, blocks = "Weak", 2
    elif strength == 2:
        label, blocks = "Medium", 3
    else:
        label, blocks = "Strong", 4
    return StrengthScore(strength, label, blocks, "composition")


def score_length(password: str) -> StrengthScore:
    length = len(password)
    if length < 6:
        value, label = 1, "Weak"
    elif length <= 12:
        value, label = 2, "Medium"
    else:
        value, label = 3, "Strong"
    return StrengthScore(value, label, value, "length")


POLICIES: Dict[str, Callable[[str], StrengthScore]] = {
    "composition": score_composition,
    "length": score_length,
}


def score_password(password: str, policy: str = "composition") -> StrengthScore:
    scorer = POLICIES.get(policy) if isinstance(policy, str) else None
    if scorer is None:
        raise UnknownPolicy(policy)
    return scorer(password)


if __name__ == "__main__":
    # For quick testing
    pwd = input("Enter password to test: ")
    result = score_password(pwd)
    print(f"Password Strength: {result.label} (Score: {result.value}, {result.blocks}/{TOTAL_BLOCKS} blocks)")

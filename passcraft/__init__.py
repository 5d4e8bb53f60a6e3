"""
PassCraft: configurable random password generator with a coarse strength rating.
"""

from .errors import ConfigError, EmptyAlphabet, PassCraftError, UnknownPolicy
from .generator import GenerationConfig, build_alphabet, generate, generate_password
from .score import POLICIES, StrengthScore, score_password

__all__ = [
    "ConfigError",
    "EmptyAlphabet",
    "PassCraftError",
    "UnknownPolicy",
    "GenerationConfig",
    "build_alphabet",
    "generate",
    "generate_password",
    "POLICIES",
    "StrengthScore",
    "score_password",
]

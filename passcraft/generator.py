"""
passcraft.generator
Password generator: assemble the alphabet from the enabled character classes,
then draw every character independently and uniformly from it.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULTS, validate_length
from .errors import ConfigError, EmptyAlphabet

logger = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
DEFAULT_SYMBOLS = "!@#$%^&*()_-+=<>?/"

# randbelow(n) -> uniform int in [0, n)
RandBelow = Callable[[int], int]

CLASS_FLAGS = ("include_uppercase", "include_lowercase", "include_numbers", "include_symbols")


@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULTS["length"]
    include_uppercase: bool = DEFAULTS["include_uppercase"]
    include_lowercase: bool = DEFAULTS["include_lowercase"]
    include_numbers: bool = DEFAULTS["include_numbers"]
    include_symbols: bool = DEFAULTS["include_symbols"]

    def __post_init__(self):
        validate_length(self.length)
        for name in CLASS_FLAGS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be true or false, got {value!r}")

    @property
    def has_classes(self) -> bool:
        return any((
            self.include_uppercase,
            self.include_lowercase,
            self.include_numbers,
            self.include_symbols,
        ))


def build_alphabet(config: GenerationConfig) -> str:
    """
    Concatenate the enabled classes in the fixed order uppercase, lowercase, numbers, symbols.
    """
    pools = []
    if config.include_uppercase:
        pools.append(UPPERCASE)
    if config.include_lowercase:
        pools.append(LOWERCASE)
    if config.include_numbers:
        pools.append(NUMBERS)
    if config.include_symbols:
        pools.append(DEFAULT_SYMBOLS)
    return "".join(pools)


def generate(config: GenerationConfig, randbelow: Optional[RandBelow] = None) -> str:
    """
    Generate a password of exactly config.length characters.

    `randbelow` is the uniform index source; it defaults to secrets.randbelow.
    Pass e.g. random.Random(seed).randrange for reproducible output.
    """
    alphabet = build_alphabet(config)
    if config.length > 0 and not alphabet:
        raise EmptyAlphabet()

    draw = randbelow or secrets.randbelow
    logger.debug("generating %d characters from a %d-character alphabet", config.length, len(alphabet))
    return "".join(alphabet[draw(len(alphabet))] for _ in range(config.length))


def generate_password(
    length: int = DEFAULTS["length"],
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    randbelow: Optional[RandBelow] = None,
) -> str:
    config = GenerationConfig(
        length=length,
        include_uppercase=use_upper,
        include_lowercase=use_lower,
        include_numbers=use_digits,
        include_symbols=use_symbols,
    )
    return generate(config, randbelow=randbelow)

import random
from itertools import product

import pytest

from passcraft.errors import ConfigError, EmptyAlphabet
from passcraft.generator import (
    DEFAULT_SYMBOLS,
    LOWERCASE,
    NUMBERS,
    UPPERCASE,
    GenerationConfig,
    build_alphabet,
    generate,
    generate_password,
)

CLASSES = (UPPERCASE, LOWERCASE, NUMBERS, DEFAULT_SYMBOLS)


def test_defaults_are_length_12_all_classes():
    cfg = GenerationConfig()
    assert cfg.length == 12
    assert build_alphabet(cfg) == UPPERCASE + LOWERCASE + NUMBERS + DEFAULT_SYMBOLS


def test_alphabet_follows_fixed_class_order():
    cfg = GenerationConfig(include_uppercase=False, include_lowercase=True,
                           include_numbers=True, include_symbols=False)
    assert build_alphabet(cfg) == LOWERCASE + NUMBERS

    cfg = GenerationConfig(include_uppercase=True, include_lowercase=False,
                           include_numbers=False, include_symbols=True)
    assert build_alphabet(cfg) == UPPERCASE + DEFAULT_SYMBOLS


@pytest.mark.parametrize("flags", [f for f in product([True, False], repeat=4) if any(f)])
def test_only_enabled_classes_are_drawn(flags):
    cfg = GenerationConfig(20, *flags)
    pw = generate(cfg, randbelow=random.Random(7).randrange)
    assert len(pw) == 20
    allowed = "".join(chars for on, chars in zip(flags, CLASSES) if on)
    disallowed = "".join(chars for on, chars in zip(flags, CLASSES) if not on)
    assert all(c in allowed for c in pw)
    assert not any(c in disallowed for c in pw)


@pytest.mark.parametrize("length", [1, 5, 12, 25])
def test_length_is_exact(length):
    assert len(generate(GenerationConfig(length=length))) == length


def test_same_seed_same_password():
    cfg = GenerationConfig(length=25)
    first = generate(cfg, randbelow=random.Random(1234).randrange)
    second = generate(cfg, randbelow=random.Random(1234).randrange)
    assert first == second


def test_injected_source_picks_indices():
    cfg = GenerationConfig(length=4, include_uppercase=False, include_lowercase=False,
                           include_numbers=True, include_symbols=False)
    indices = iter([0, 9, 3, 3])
    assert generate(cfg, randbelow=lambda n: next(indices)) == "0933"


def test_all_classes_disabled_raises_empty_alphabet():
    cfg = GenerationConfig(length=8, include_uppercase=False, include_lowercase=False,
                           include_numbers=False, include_symbols=False)
    assert not cfg.has_classes
    with pytest.raises(EmptyAlphabet):
        generate(cfg)


def test_empty_alphabet_is_a_value_error():
    with pytest.raises(ValueError):
        generate_password(length=8, use_upper=False, use_lower=False,
                          use_digits=False, use_symbols=False)


@pytest.mark.parametrize("length", [0, -1, 26, 100, "12", 12.0, True])
def test_out_of_range_length_rejected(length):
    with pytest.raises(ConfigError):
        GenerationConfig(length=length)


def test_generate_password_keywords():
    pw = generate_password(length=10, use_symbols=False, randbelow=random.Random(3).randrange)
    assert len(pw) == 10
    assert not any(c in DEFAULT_SYMBOLS for c in pw)


@pytest.mark.parametrize("flag", ["include_uppercase", "include_lowercase", "include_numbers", "include_symbols"])
@pytest.mark.parametrize("value", ["false", 0, 1, None])
def test_class_flags_must_be_bool(flag, value):
    with pytest.raises(ConfigError):
        GenerationConfig(length=12, **{flag: value})

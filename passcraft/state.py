"""
passcraft.state
Immutable application state and the transitions applied per user action.

Front-ends keep a single AppState and replace it with reduce(state, action)
after every slider move, checkbox toggle, Generate click, copy or dismissal.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from .config import DEFAULTS, clamp_length
from .errors import PassCraftError
from .generator import CLASS_FLAGS, GenerationConfig, RandBelow, generate
from .notification import copy_to_clipboard
from .score import StrengthScore, score_password

CLASS_FIELDS = CLASS_FLAGS


@dataclass(frozen=True)
class AppState:
    config: GenerationConfig = field(default_factory=GenerationConfig)
    policy: str = DEFAULTS["strength_policy"]
    password: str = ""
    strength: Optional[StrengthScore] = None
    notification: Optional[str] = None
    error: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        return self.config.has_classes


# ---------------- actions ----------------

@dataclass(frozen=True)
class SetLength:
    length: int


@dataclass(frozen=True)
class ToggleClass:
    name: str


@dataclass(frozen=True)
class Generate:
    randbelow: Optional[RandBelow] = None


@dataclass(frozen=True)
class Copy:
    write: Callable[[str], object]


@dataclass(frozen=True)
class DismissNotification:
    pass


Action = Union[SetLength, ToggleClass, Generate, Copy, DismissNotification]


def initial_state(policy: Optional[str] = None) -> AppState:
    return AppState(policy=policy or DEFAULTS["strength_policy"])


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that follows `action`. `state` itself is never modified."""
    if isinstance(action, SetLength):
        config = replace(state.config, length=clamp_length(action.length))
        return replace(state, config=config)

    if isinstance(action, ToggleClass):
        if action.name not in CLASS_FIELDS:
            raise ValueError(f"Unknown character class: {action.name!r}")
        config = replace(state.config, **{action.name: not getattr(state.config, action.name)})
        return replace(state, config=config, error=None)

    if isinstance(action, Generate):
        try:
            password = generate(state.config, randbelow=action.randbelow)
            strength = score_password(password, state.policy)
        except PassCraftError as e:
            # keep the previous password on display
            return replace(state, error=str(e))
        return replace(state, password=password, strength=strength, error=None)

    if isinstance(action, Copy):
        return replace(state, notification=copy_to_clipboard(state.password, action.write))

    if isinstance(action, DismissNotification):
        return replace(state, notification=None)

    raise TypeError(f"Unsupported action: {action!r}")

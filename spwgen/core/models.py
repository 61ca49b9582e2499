from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Tuple


DEFAULT_PASSWORD_LENGTH = 16
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
DEFAULT_HISTORY_SIZE = 5

TIER_VERY_WEAK = "very_weak"
TIER_WEAK = "weak"
TIER_MEDIUM = "medium"
TIER_STRONG = "strong"
TIER_VERY_STRONG = "very_strong"
TIERS: Tuple[str, ...] = (TIER_VERY_WEAK, TIER_WEAK, TIER_MEDIUM, TIER_STRONG, TIER_VERY_STRONG)
TIER_LABELS = {
    TIER_VERY_WEAK: "Very Weak",
    TIER_WEAK: "Weak",
    TIER_MEDIUM: "Medium",
    TIER_STRONG: "Strong",
    TIER_VERY_STRONG: "Very Strong",
}


@dataclass(frozen=True)
class Policy:
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True
    extended_ascii: bool = False
    allow_ambiguous: bool = False

    def has_inclusion(self) -> bool:
        return any((self.lowercase, self.uppercase, self.digits, self.symbols, self.extended_ascii))


@dataclass(frozen=True)
class PasswordRequest:
    policy: Policy = field(default_factory=Policy)
    length: int = DEFAULT_PASSWORD_LENGTH
    count: int = 1


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    tier: str
    crack_time: str

    @property
    def level(self) -> int:
        return TIERS.index(self.tier)

    @property
    def label(self) -> str:
        return TIER_LABELS[self.tier]


def _format_bits(bits_value: float) -> str:
    if not math.isfinite(bits_value):
        return "unknown"
    rounded = round(bits_value, 3)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class PasswordResult:
    outputs: Tuple[str, ...]
    pool_size: int
    length: int
    strength: StrengthReport

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        if not show_meta:
            return self.outputs
        meta = (
            f"[entropy={_format_bits(self.strength.entropy_bits)} bits"
            f" tier={self.strength.tier}"
            f" crack_time={self.strength.crack_time}]"
        )
        return tuple(f"{value}\t{meta}" for value in self.outputs)

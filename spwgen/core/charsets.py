from __future__ import annotations

import string
from typing import Tuple

from spwgen.core.error_dialect import EmptyPoolError, InvalidPolicyError
from spwgen.core.models import Policy


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?/~`\"'\\"
# Currency/typographic marks followed by the Latin-1 letters (U+00C0..U+00FF without the
# multiplication and division signs).
EXTENDED_ASCII = "€£¥¢§©®™¿¡" + "".join(chr(cp) for cp in range(0xC0, 0x100) if cp not in (0xD7, 0xF7))
AMBIGUOUS = "Il1O0"

# Fixed class order; pool layout depends on it.
CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("digits", DIGITS),
    ("symbols", SYMBOLS),
    ("extended_ascii", EXTENDED_ASCII),
)


def selected_classes(policy: Policy) -> Tuple[str, ...]:
    return tuple(name for name, _ in CHARACTER_CLASSES if getattr(policy, name))


def build_pool(policy: Policy) -> str:
    """Return the ordered, de-duplicated pool of characters allowed by ``policy``.

    Ambiguous characters are dropped from every class unless the policy allows them.
    Raises ``InvalidPolicyError`` when no class is selected and ``EmptyPoolError``
    when filtering leaves nothing to draw from.
    """
    if not policy.has_inclusion():
        raise InvalidPolicyError("at least one character class must be selected")

    seen: set[str] = set()
    pool: list[str] = []
    for name, chars in CHARACTER_CLASSES:
        if not getattr(policy, name):
            continue
        for ch in chars:
            if ch in seen:
                continue
            if not policy.allow_ambiguous and ch in AMBIGUOUS:
                continue
            seen.add(ch)
            pool.append(ch)

    if not pool:
        raise EmptyPoolError("character pool is empty after removing ambiguous characters")
    return "".join(pool)

"""Core generation engine, models, and service APIs for spwgen."""

from __future__ import annotations


def generate(policy, length, *, source=None):
    from spwgen.core.password_engine import generate as _generate

    return _generate(policy, length, source=source)


def estimate_strength(pool_size, length, **kwargs):
    from spwgen.core.strength import estimate_strength as _estimate_strength

    return _estimate_strength(pool_size, length, **kwargs)


def generate_passwords(request, **kwargs):
    from spwgen.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request, **kwargs)


__all__ = ["estimate_strength", "generate", "generate_passwords"]

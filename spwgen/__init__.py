"""spwgen: secure password generation with entropy-based strength estimates."""

from __future__ import annotations

from spwgen.core import estimate_strength, generate, generate_passwords

__all__ = ["estimate_strength", "generate", "generate_passwords"]

from __future__ import annotations

import unittest

from spwgen.core.error_dialect import (
    EmptyPoolError,
    InvalidLengthError,
    InvalidPolicyError,
    RandomSourceUnavailableError,
    SpwError,
    error_detail_from_exception,
    format_error_text,
)


class ErrorDialectTests(unittest.TestCase):
    def test_typed_errors_carry_stable_codes(self) -> None:
        self.assertEqual(InvalidPolicyError("x").code, "invalid_policy")
        self.assertEqual(EmptyPoolError("x").code, "empty_pool")
        self.assertEqual(InvalidLengthError("x").code, "invalid_length")
        self.assertEqual(RandomSourceUnavailableError("x").code, "random_source_unavailable")

    def test_errors_are_value_errors(self) -> None:
        for cls in (InvalidPolicyError, EmptyPoolError, InvalidLengthError, RandomSourceUnavailableError):
            with self.subTest(cls=cls):
                self.assertTrue(issubclass(cls, SpwError))
                self.assertTrue(issubclass(cls, ValueError))

    def test_explicit_code_is_normalized(self) -> None:
        err = SpwError("  bad thing  ", code="Bad-Thing.Here ")
        self.assertEqual(err.code, "bad_thing_here")
        self.assertEqual(err.message, "bad thing")

    def test_blank_message_gets_placeholder(self) -> None:
        self.assertEqual(SpwError("   ").message, "unspecified error")

    def test_format_error_text(self) -> None:
        self.assertEqual(format_error_text(InvalidLengthError("too short")), "invalid_length: too short")
        self.assertEqual(format_error_text(ValueError("plain")), "invalid_request: plain")
        self.assertEqual(
            format_error_text(ValueError(""), default_code="invalid-config", default_message="bad config"),
            "invalid_config: bad config",
        )

    def test_error_detail_from_exception(self) -> None:
        detail = error_detail_from_exception(EmptyPoolError("nothing left"))
        self.assertEqual(detail.code, "empty_pool")
        self.assertEqual(detail.message, "nothing left")


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import unittest

import spwgen
from spwgen.core.error_dialect import InvalidLengthError, InvalidPolicyError
from spwgen.core.history import HistoryStore
from spwgen.core.models import PasswordRequest, Policy
from spwgen.core.password_service import generate_passwords

_ALNUM = Policy(symbols=False, allow_ambiguous=True)


class ServiceLayerTests(unittest.TestCase):
    def test_password_service_generates_expected_count(self) -> None:
        result = generate_passwords(PasswordRequest(policy=_ALNUM, length=12, count=4))
        self.assertEqual(len(result.outputs), 4)
        self.assertEqual(result.pool_size, 62)
        self.assertEqual(result.length, 12)
        for value in result.outputs:
            self.assertEqual(len(value), 12)
            self.assertTrue(value.isalnum())

    def test_strength_depends_only_on_pool_and_length(self) -> None:
        first = generate_passwords(PasswordRequest(policy=_ALNUM, length=16))
        second = generate_passwords(PasswordRequest(policy=_ALNUM, length=16))
        self.assertNotEqual(first.outputs, second.outputs)
        self.assertEqual(first.strength, second.strength)
        self.assertEqual(first.strength.tier, "strong")

    def test_meta_lines_include_strength(self) -> None:
        result = generate_passwords(PasswordRequest(policy=_ALNUM, length=16, count=2))
        lines = result.as_lines(show_meta=True)
        self.assertEqual(len(lines), 2)
        for line, value in zip(lines, result.outputs):
            self.assertTrue(line.startswith(value + "\t"))
            self.assertIn("[entropy=95.267 bits tier=strong crack_time=Millions of years]", line)
        self.assertEqual(result.as_lines(), result.outputs)

    def test_history_records_newest_first_and_bounds(self) -> None:
        history = HistoryStore()
        result = generate_passwords(PasswordRequest(length=8, count=7), history=history)
        self.assertEqual(history.list(), tuple(reversed(result.outputs))[:5])

    def test_history_untouched_on_failure(self) -> None:
        history = HistoryStore()
        with self.assertRaises(InvalidLengthError):
            generate_passwords(PasswordRequest(length=200), history=history)
        self.assertEqual(history.list(), ())

    def test_count_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "count must be > 0"):
            generate_passwords(PasswordRequest(count=0))

    def test_invalid_policy_propagates(self) -> None:
        policy = Policy(lowercase=False, uppercase=False, digits=False, symbols=False)
        with self.assertRaises(InvalidPolicyError):
            generate_passwords(PasswordRequest(policy=policy))

    def test_guesses_per_second_feeds_crack_time(self) -> None:
        result = generate_passwords(
            PasswordRequest(policy=Policy(lowercase=False, uppercase=False, symbols=False), length=8),
            guesses_per_second=1.0,
        )
        # Digits without "0" and "1": 8**8 / 2 seconds ~= 97 days at one guess per second.
        self.assertEqual(result.pool_size, 8)
        self.assertEqual(result.strength.entropy_bits, 24.0)
        self.assertEqual(result.strength.crack_time, "97 days")

    def test_package_entry_points(self) -> None:
        value = spwgen.generate(Policy(), 20)
        self.assertEqual(len(value), 20)
        self.assertEqual(spwgen.estimate_strength(64, 16).tier, "strong")
        result = spwgen.generate_passwords(PasswordRequest(count=2))
        self.assertEqual(len(result.outputs), 2)


if __name__ == "__main__":
    unittest.main()

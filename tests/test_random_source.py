from __future__ import annotations

import unittest
from unittest.mock import patch

from spwgen.core.random_source import (
    SystemRandomSource,
    assert_csprng_ready,
    secure_random_bytes,
)


class RandomSourceTests(unittest.TestCase):
    def test_secure_random_bytes_wraps_os_errors(self) -> None:
        with patch("spwgen.core.random_source.os.urandom", side_effect=OSError("rng unavailable")):
            with self.assertRaisesRegex(OSError, "OS CSPRNG failure requesting 16 byte\\(s\\)"):
                secure_random_bytes(16)

    def test_secure_random_bytes_rejects_short_reads(self) -> None:
        with patch("spwgen.core.random_source.os.urandom", return_value=b"\x00"):
            with self.assertRaisesRegex(OSError, "unexpected byte count"):
                secure_random_bytes(2)

    def test_secure_random_bytes_rejects_non_positive_counts(self) -> None:
        for bad in (0, -1, True, 1.5):
            with self.subTest(bad=bad):
                with self.assertRaisesRegex(ValueError, "positive integer"):
                    secure_random_bytes(bad)  # type: ignore[arg-type]

    def test_secure_random_bytes_returns_requested_count(self) -> None:
        self.assertEqual(len(secure_random_bytes(33)), 33)

    def test_system_source_delegates_to_os_urandom(self) -> None:
        with patch("spwgen.core.random_source.os.urandom", return_value=b"\x01\x02\x03\x04") as mocked:
            out = SystemRandomSource().get_bytes(4)
        mocked.assert_called_once_with(4)
        self.assertEqual(out, b"\x01\x02\x03\x04")

    def test_assert_csprng_ready_surfaces_failure(self) -> None:
        with patch("spwgen.core.random_source.os.urandom", side_effect=OSError("no entropy")):
            with self.assertRaisesRegex(OSError, "OS CSPRNG failure"):
                assert_csprng_ready()


if __name__ == "__main__":
    unittest.main()

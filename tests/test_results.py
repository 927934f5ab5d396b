import unittest
from datetime import datetime, timedelta, timezone

from status_checker.checks.results import CheckResult, Failure, Success

TS = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class CheckResultTests(unittest.TestCase):
    def test_success_accessors(self) -> None:
        res = CheckResult(url="http://a.local", outcome=Success(503), latency_ms=12, timestamp=TS)

        self.assertTrue(res.ok)
        self.assertEqual(res.status_code, 503)
        self.assertIsNone(res.error)

    def test_failure_accessors(self) -> None:
        res = CheckResult(url="http://a.local", outcome=Failure("refused"), latency_ms=3, timestamp=TS)

        self.assertFalse(res.ok)
        self.assertIsNone(res.status_code)
        self.assertEqual(res.error, "refused")

    def test_to_dict_shapes(self) -> None:
        ok = CheckResult(url="http://a.local", outcome=Success(200), latency_ms=12, timestamp=TS)
        bad = CheckResult(url="http://b.local", outcome=Failure("boom"), latency_ms=7, timestamp=TS)

        self.assertEqual(
            ok.to_dict(),
            {
                "url": "http://a.local",
                "status": {"Ok": 200},
                "response_time_ms": 12,
                "timestamp": "2026-03-01T12:00:00Z",
            },
        )
        self.assertEqual(bad.to_dict()["status"], {"Err": "boom"})

    def test_timestamp_serialized_as_utc(self) -> None:
        local = TS.astimezone(timezone(timedelta(hours=2)))
        res = CheckResult(url="http://a.local", outcome=Success(200), latency_ms=1, timestamp=local)

        self.assertEqual(res.to_dict()["timestamp"], "2026-03-01T12:00:00Z")

    def test_url_kept_as_given(self) -> None:
        res = CheckResult(url="HTTP://Example.LOCAL/a/../b", outcome=Success(200), latency_ms=0, timestamp=TS)
        self.assertEqual(res.to_dict()["url"], "HTTP://Example.LOCAL/a/../b")

    def test_negative_latency_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CheckResult(url="http://a.local", outcome=Success(200), latency_ms=-1, timestamp=TS)

    def test_status_code_range(self) -> None:
        with self.assertRaises(ValueError):
            Success(70000)


if __name__ == "__main__":
    unittest.main()

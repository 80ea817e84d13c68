import threading
import unittest

from dhtml.rate_limiter import RateLimiter


class TestRateLimiter(unittest.TestCase):
    """Test cases for the sliding-window rate limiter."""

    def test_allows_up_to_limit(self):
        limiter = RateLimiter(3, 60)
        self.assertEqual([limiter.allow("a", now=t) for t in (0, 1, 2, 3)], [True, True, True, False])

    def test_window_slides(self):
        limiter = RateLimiter(2, 10)
        self.assertTrue(limiter.allow("a", now=0))
        self.assertTrue(limiter.allow("a", now=5))
        self.assertFalse(limiter.allow("a", now=9))
        # The request at t=0 has left the window
        self.assertTrue(limiter.allow("a", now=10.5))
        self.assertFalse(limiter.allow("a", now=11))

    def test_rejected_requests_are_not_recorded(self):
        limiter = RateLimiter(1, 10)
        self.assertTrue(limiter.allow("a", now=0))
        for t in range(1, 10):
            self.assertFalse(limiter.allow("a", now=t))
        self.assertTrue(limiter.allow("a", now=10.5))

    def test_clients_are_independent(self):
        limiter = RateLimiter(1, 60)
        self.assertTrue(limiter.allow("a", now=0))
        self.assertTrue(limiter.allow("b", now=0))
        self.assertFalse(limiter.allow("a", now=1))

    def test_zero_limit_rejects_everything(self):
        limiter = RateLimiter(0, 60)
        self.assertFalse(limiter.allow("a"))
        self.assertEqual(limiter.client_count, 0)

    def test_idle_clients_are_dropped(self):
        """Rotating client ids cannot grow the table past one window of clients."""
        limiter = RateLimiter(5, 10)
        for i in range(100):
            limiter.allow(f"10.0.0.{i}", now=float(i))
            self.assertLessEqual(limiter.client_count, 21)

        limiter.allow("late", now=1000)
        self.assertEqual(limiter.client_count, 1)

    def test_active_client_survives_sweep(self):
        limiter = RateLimiter(2, 10)
        self.assertTrue(limiter.allow("a", now=0))
        self.assertTrue(limiter.allow("a", now=8))
        self.assertTrue(limiter.allow("b", now=11))
        self.assertEqual(limiter.client_count, 2)
        # The request at t=8 is still counted after the sweep
        self.assertTrue(limiter.allow("a", now=12))
        self.assertFalse(limiter.allow("a", now=13))

    def test_reset(self):
        limiter = RateLimiter(1, 60)
        limiter.allow("a")
        self.assertFalse(limiter.allow("a"))
        limiter.reset()
        self.assertTrue(limiter.allow("a"))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            RateLimiter(-1, 60)
        with self.assertRaises(ValueError):
            RateLimiter(10, 0)

    def test_concurrent_requests_respect_limit(self):
        limiter = RateLimiter(50, 60)
        results = []
        lock = threading.Lock()

        def worker():
            for _ in range(20):
                allowed = limiter.allow("shared")
                with lock:
                    results.append(allowed)

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 100)
        self.assertEqual(results.count(True), 50)


if __name__ == "__main__":
    unittest.main()

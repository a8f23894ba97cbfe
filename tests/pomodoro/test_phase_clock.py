import unittest

from pomodoro.clock import PhaseClock


class PhaseClockTests(unittest.TestCase):
    def test_start_sets_running_with_full_duration(self) -> None:
        clock = PhaseClock()
        clock.start(1500)

        self.assertEqual("running", clock.run_state)
        self.assertEqual(1500, clock.remaining_seconds)
        self.assertEqual(1500, clock.duration_seconds)
        self.assertFalse(clock.expired)

    def test_start_rejects_non_positive_duration(self) -> None:
        clock = PhaseClock()
        with self.assertRaises(ValueError):
            clock.start(0)

    def test_tick_signals_expiry_exactly_once(self) -> None:
        clock = PhaseClock()
        clock.start(3)

        self.assertFalse(clock.tick(2.0))
        self.assertTrue(clock.tick(5.0))
        self.assertFalse(clock.tick(1.0))
        self.assertEqual(0, clock.remaining_seconds)
        self.assertTrue(clock.expired)

    def test_fractional_ticks_accumulate_without_drift(self) -> None:
        clock = PhaseClock()
        clock.start(10)

        expired = [clock.tick(0.25) for _ in range(39)]
        self.assertFalse(any(expired))
        self.assertEqual(1, clock.remaining_seconds)
        self.assertTrue(clock.tick(0.25))

    def test_remaining_seconds_rounds_up_partial_seconds(self) -> None:
        clock = PhaseClock()
        clock.start(60)
        clock.tick(0.4)

        self.assertEqual(60, clock.remaining_seconds)
        self.assertAlmostEqual(59.6, clock.remaining)

    def test_ticks_while_paused_do_not_elapse(self) -> None:
        clock = PhaseClock()
        clock.start(60)
        clock.tick(10)

        self.assertTrue(clock.pause())
        for _ in range(100):
            self.assertFalse(clock.tick(1.0))
        self.assertTrue(clock.resume())

        self.assertEqual(50, clock.remaining_seconds)

    def test_pause_and_resume_are_noops_in_target_state(self) -> None:
        clock = PhaseClock()
        clock.start(60)

        self.assertFalse(clock.resume())
        self.assertTrue(clock.pause())
        self.assertFalse(clock.pause())
        self.assertEqual("paused", clock.run_state)

    def test_adjust_adds_minutes_without_upper_bound(self) -> None:
        clock = PhaseClock()
        clock.start(60)

        for _ in range(200):
            clock.adjust(1)

        self.assertEqual(60 + 200 * 60, clock.remaining_seconds)

    def test_adjust_below_zero_clamps_and_expires(self) -> None:
        clock = PhaseClock()
        clock.start(45)

        self.assertTrue(clock.adjust(-1))
        self.assertEqual(0, clock.remaining_seconds)
        self.assertEqual(0.0, clock.remaining)
        self.assertFalse(clock.adjust(-1))

    def test_restart_clears_expiry_latch(self) -> None:
        clock = PhaseClock()
        clock.start(1)
        self.assertTrue(clock.tick(1))

        clock.start(2)
        self.assertFalse(clock.expired)
        self.assertTrue(clock.tick(2))


if __name__ == "__main__":
    unittest.main()

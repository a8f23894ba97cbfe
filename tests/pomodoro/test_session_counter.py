import unittest

from pomodoro.counter import SessionCounter


class SessionCounterTests(unittest.TestCase):
    def test_four_session_cadence_wraps_to_short_break(self) -> None:
        counter = SessionCounter(total_sessions=4)
        kinds = []
        for _ in range(5):
            kinds.append(counter.next_break_kind())
            counter.advance_after_work()

        self.assertEqual(
            ["short_break", "short_break", "short_break", "long_break", "short_break"],
            kinds,
        )
        self.assertEqual(2, counter.current_session)

    def test_advance_wraps_after_last_session(self) -> None:
        counter = SessionCounter(total_sessions=2)
        counter.advance_after_work()
        self.assertEqual(2, counter.current_session)
        counter.advance_after_work()
        self.assertEqual(1, counter.current_session)

    def test_single_session_always_long_break(self) -> None:
        counter = SessionCounter(total_sessions=1)
        for _ in range(3):
            self.assertEqual("long_break", counter.next_break_kind())
            counter.advance_after_work()
            self.assertEqual(1, counter.current_session)

    def test_completed_since_long_break_resets_on_long_break(self) -> None:
        counter = SessionCounter(total_sessions=3)
        counter.advance_after_work()
        counter.advance_after_work()
        self.assertEqual(2, counter.completed_sessions_since_long_break)

        counter.advance_after_work()
        self.assertEqual(0, counter.completed_sessions_since_long_break)

    def test_next_break_kind_is_query_only(self) -> None:
        counter = SessionCounter(total_sessions=4)
        for _ in range(10):
            counter.next_break_kind()
        self.assertEqual(1, counter.current_session)

    def test_rejects_non_positive_total(self) -> None:
        with self.assertRaises(ValueError):
            SessionCounter(total_sessions=0)


if __name__ == "__main__":
    unittest.main()

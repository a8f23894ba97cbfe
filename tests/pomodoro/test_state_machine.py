import logging
import unittest

from pomodoro import SessionConfig, SessionStateMachine


def _machine(**overrides) -> SessionStateMachine:
    values = {
        "work_minutes": 25,
        "short_break_minutes": 5,
        "long_break_minutes": 15,
        "total_sessions": 4,
    }
    values.update(overrides)
    return SessionStateMachine(
        SessionConfig(**values),
        logger=logging.getLogger("test.pomodoro"),
    )


class SessionStateMachineTests(unittest.TestCase):
    def test_initial_state_is_running_work(self) -> None:
        machine = _machine(work_minutes=50)
        snapshot = machine.snapshot()

        self.assertEqual("work", snapshot.phase_kind)
        self.assertEqual("running", snapshot.run_state)
        self.assertEqual(3000, snapshot.remaining_seconds)
        self.assertEqual(1, snapshot.current_session)
        self.assertEqual(4, snapshot.total_sessions)
        self.assertFalse(snapshot.is_quit)
        self.assertEqual("work", machine.stage)

    def test_config_rejects_non_positive_values(self) -> None:
        with self.assertRaises(ValueError):
            SessionConfig(work_minutes=0)
        with self.assertRaises(ValueError):
            SessionConfig(total_sessions=-1)

    def test_full_cycle_scenario(self) -> None:
        machine = _machine()
        self.assertEqual(1500, machine.snapshot().remaining_seconds)

        completed = machine.tick(1500)
        self.assertTrue(completed.accepted)
        self.assertEqual("work_completed", completed.reason)
        self.assertEqual("awaiting_break_start", completed.snapshot.run_state)
        self.assertEqual("short_break", completed.snapshot.phase_kind)
        self.assertEqual(2, completed.snapshot.current_session)
        self.assertEqual(300, completed.snapshot.remaining_seconds)
        self.assertEqual("awaiting_break", machine.stage)

        started = machine.handle_key("enter")
        self.assertEqual("break_started", started.reason)
        self.assertEqual("short_break", started.snapshot.phase_kind)
        self.assertEqual("running", started.snapshot.run_state)
        self.assertEqual(300, started.snapshot.remaining_seconds)
        self.assertEqual("break", machine.stage)

        back_to_work = machine.tick(300)
        self.assertEqual("break_completed", back_to_work.reason)
        self.assertEqual("work", back_to_work.snapshot.phase_kind)
        self.assertEqual(1500, back_to_work.snapshot.remaining_seconds)
        self.assertEqual(2, back_to_work.snapshot.current_session)
        self.assertEqual("work", machine.stage)

    def test_work_expiry_happens_exactly_once(self) -> None:
        machine = _machine(work_minutes=1)

        results = [machine.tick(20) for _ in range(6)]
        completions = [result for result in results if result.reason == "work_completed"]

        self.assertEqual(1, len(completions))
        self.assertIs(completions[0], results[2])
        for result in results[3:]:
            self.assertFalse(result.accepted)
            self.assertEqual("not_timed", result.reason)
            self.assertEqual((), result.effects)

    def test_work_completion_requests_notify_and_sound(self) -> None:
        machine = _machine(work_minutes=1)
        result = machine.tick(60)

        kinds = [effect.kind for effect in result.effects]
        self.assertEqual(["notify", "sound"], kinds)
        self.assertEqual("Pomodoro", result.effects[0].title)
        self.assertEqual(
            "Work session finished! Time for a short break.",
            result.effects[0].message,
        )

    def test_fourth_session_selects_long_break(self) -> None:
        machine = _machine(work_minutes=1, short_break_minutes=1)
        for _ in range(3):
            machine.tick(60)
            machine.handle_key("s")

        result = machine.tick(60)
        self.assertEqual("long_break", result.snapshot.phase_kind)
        self.assertEqual(1, result.snapshot.current_session)
        self.assertEqual(
            "Work session finished! Time for a long break.",
            result.effects[0].message,
        )

        machine.handle_key("enter")
        self.assertEqual(15 * 60, machine.snapshot().remaining_seconds)
        finished = machine.tick(15 * 60)
        self.assertEqual("Long break finished! Back to work.", finished.effects[0].message)

    def test_pause_stops_time_until_resume(self) -> None:
        machine = _machine()
        machine.tick(100)

        paused = machine.handle_key("space")
        self.assertTrue(paused.accepted)
        self.assertEqual("paused", paused.snapshot.run_state)

        for _ in range(50):
            tick = machine.tick(60)
            self.assertFalse(tick.accepted)
            self.assertEqual("not_running", tick.reason)

        resumed = machine.handle_key("space")
        self.assertEqual("resumed", resumed.reason)
        self.assertEqual("running", resumed.snapshot.run_state)
        self.assertEqual(1400, resumed.snapshot.remaining_seconds)

    def test_explicit_pause_and_resume_are_noops_in_target_state(self) -> None:
        machine = _machine()

        self.assertEqual("not_paused", machine.resume().reason)
        self.assertTrue(machine.pause().accepted)
        self.assertEqual("not_running", machine.pause().reason)

    def test_adjust_changes_remaining_on_running_clock(self) -> None:
        machine = _machine()

        up = machine.handle_key("up")
        self.assertEqual("adjusted", up.reason)
        self.assertEqual(1560, up.snapshot.remaining_seconds)

        down = machine.handle_key("down")
        self.assertEqual(1500, down.snapshot.remaining_seconds)

    def test_adjust_ignored_while_paused(self) -> None:
        machine = _machine()
        machine.pause()

        result = machine.handle_key("up")
        self.assertFalse(result.accepted)
        self.assertEqual("not_running", result.reason)
        self.assertEqual(1500, result.snapshot.remaining_seconds)

    def test_adjust_down_below_minute_completes_work_once(self) -> None:
        machine = _machine(work_minutes=1)
        machine.tick(30)

        result = machine.handle_key("down")
        self.assertEqual("adjust", result.command)
        self.assertEqual("work_completed", result.reason)
        self.assertEqual("awaiting_break_start", result.snapshot.run_state)
        self.assertEqual(1, [effect.kind for effect in result.effects].count("notify"))

        again = machine.handle_key("down")
        self.assertFalse(again.accepted)
        self.assertEqual((), again.effects)

    def test_adjust_down_in_break_returns_to_work(self) -> None:
        machine = _machine(work_minutes=1, short_break_minutes=1)
        machine.tick(60)
        machine.confirm()

        result = machine.adjust(-1)
        self.assertEqual("break_completed", result.reason)
        self.assertEqual("work", result.snapshot.phase_kind)
        self.assertEqual(
            "Short break finished! Back to work.",
            result.effects[0].message,
        )

    def test_skip_during_work_behaves_like_expiry(self) -> None:
        machine = _machine()
        result = machine.handle_key("s")

        self.assertEqual("work_skipped", result.reason)
        self.assertEqual("awaiting_break_start", result.snapshot.run_state)
        self.assertEqual(2, result.snapshot.current_session)
        self.assertEqual(["notify", "sound"], [effect.kind for effect in result.effects])

    def test_skip_during_prompt_bypasses_break_without_notification(self) -> None:
        machine = _machine()
        machine.tick(1500)

        result = machine.handle_key("s")
        self.assertEqual("break_skipped", result.reason)
        self.assertEqual("work", result.snapshot.phase_kind)
        self.assertEqual("running", result.snapshot.run_state)
        self.assertEqual(1500, result.snapshot.remaining_seconds)
        self.assertEqual((), result.effects)

    def test_skip_during_break_returns_to_work_silently(self) -> None:
        machine = _machine()
        machine.tick(1500)
        machine.handle_key("enter")
        machine.tick(100)

        result = machine.handle_key("s")
        self.assertEqual("work", result.snapshot.phase_kind)
        self.assertEqual(1500, result.snapshot.remaining_seconds)
        self.assertEqual(2, result.snapshot.current_session)
        self.assertEqual((), result.effects)

    def test_prompt_ignores_pause_adjust_and_ticks(self) -> None:
        machine = _machine()
        machine.tick(1500)

        for key in ("space", "up", "down"):
            result = machine.handle_key(key)
            self.assertFalse(result.accepted)
            self.assertEqual("not_timed", result.reason)
        self.assertFalse(machine.tick(10_000).accepted)
        self.assertEqual("awaiting_break_start", machine.snapshot().run_state)

    def test_confirm_outside_prompt_is_noop(self) -> None:
        machine = _machine()
        result = machine.handle_key("enter")

        self.assertFalse(result.accepted)
        self.assertEqual("not_awaiting_break", result.reason)
        self.assertEqual("work", result.snapshot.phase_kind)

    def test_unrecognized_keys_are_noops(self) -> None:
        machine = _machine()
        before = machine.snapshot()

        for key in ("tab", "backspace", "7", "x", "", None):
            result = machine.handle_key(key)
            self.assertFalse(result.accepted)
            self.assertEqual("unsupported_key", result.reason)

        self.assertEqual(before, machine.snapshot())

    def test_quit_from_every_state_is_terminal(self) -> None:
        def work(machine):
            return machine

        def paused(machine):
            machine.pause()
            return machine

        def awaiting(machine):
            machine.tick(1500)
            return machine

        def on_break(machine):
            machine.tick(1500)
            machine.confirm()
            return machine

        for prepare in (work, paused, awaiting, on_break):
            with self.subTest(state=prepare.__name__):
                machine = prepare(_machine())
                result = machine.handle_key("q")

                self.assertTrue(result.accepted)
                self.assertEqual("quit", result.reason)
                self.assertEqual((), result.effects)
                self.assertTrue(machine.is_quit)
                self.assertTrue(result.snapshot.is_quit)

                after = machine.tick(10_000)
                self.assertFalse(after.accepted)
                self.assertEqual("finished", after.reason)
                self.assertEqual((), after.effects)
                self.assertFalse(machine.handle_key("s").accepted)


if __name__ == "__main__":
    unittest.main()

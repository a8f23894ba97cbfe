import curses
import locale
import logging
import logging.handlers
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from app_config import (
    AppConfig,
    AppConfigurationError,
    load_app_config,
    resolve_config_path,
)
from alerts import (
    AlertConfig,
    AlertConfigurationError,
    DesktopNotifier,
    SoundError,
    SoundPlayer,
)
from pomodoro import SessionConfig, SessionStateMachine
from runtime import EffectDependencies, EffectDispatcher, LoopDependencies, SessionLoop
from terminal import CursesKeySource, CursesRenderer, run_setup

HELD_LOG_RECORDS = 10000


def setup_logging(level: int = logging.WARNING, log_file: str = "") -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=log_file or None,
    )
    return logging.getLogger("pomodoro_tui")


@contextmanager
def hold_console_logging(capacity: int = HELD_LOG_RECORDS) -> Iterator[None]:
    """Buffer records bound for console handlers and emit them on exit.

    Curses owns the terminal inside this block; file handlers are left alone.
    """
    root = logging.getLogger()
    buffers: list[logging.handlers.MemoryHandler] = []
    for handler in list(root.handlers):
        if type(handler) is not logging.StreamHandler:
            continue
        buffer = logging.handlers.MemoryHandler(
            capacity,
            flushLevel=logging.CRITICAL + 1,
            target=handler,
        )
        root.removeHandler(handler)
        root.addHandler(buffer)
        buffers.append(buffer)

    try:
        yield
    finally:
        for buffer in buffers:
            target = buffer.target
            root.removeHandler(buffer)
            if target is not None:
                root.addHandler(target)
            buffer.close()


def apply_system_locale(logger: logging.Logger) -> None:
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as error:
        logger.debug("System locale not available (%s); using the C locale.", error)


def build_effect_dispatcher(
    alert_config: AlertConfig,
    logger: logging.Logger,
    *,
    notifier: Optional[DesktopNotifier] = None,
) -> EffectDispatcher:
    """Create notifier and sound collaborators enabled by configuration."""
    if not alert_config.notifications_enabled:
        notifier = None
    else:
        notifier = notifier or DesktopNotifier(logger=logging.getLogger("alerts.notify"))
        if not notifier.is_available():
            logger.warning("Desktop notifier not available; notifications disabled.")
            notifier = None

    sound_player: Optional[SoundPlayer] = None
    if alert_config.sound_enabled:
        try:
            sound_player = SoundPlayer(
                sound_file=alert_config.sound_file,
                output_device_index=alert_config.output_device_index,
                volume=alert_config.volume,
                logger=logging.getLogger("alerts.sound"),
            )
        except SoundError as error:
            logger.warning("%s Completion sound disabled.", error)

    return EffectDispatcher(
        EffectDependencies(
            notifier=notifier,
            sound_player=sound_player,
            logger=logging.getLogger("runtime.effects"),
        )
    )


def run_session(
    window: Any,
    app_config: AppConfig,
    effects: EffectDispatcher,
    logger: logging.Logger,
) -> int:
    """Run setup and the session loop inside an initialised curses window."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal does not support hiding the cursor.")

    keys = CursesKeySource(window)
    renderer = CursesRenderer(window, logger=logging.getLogger("terminal"))

    session_config = SessionConfig.from_settings(app_config.timer)
    if app_config.timer.show_setup:
        selected = run_setup(
            keys,
            renderer,
            session_config,
            logger=logging.getLogger("terminal.setup"),
        )
        if selected is None:
            return 0
        session_config = selected

    machine = SessionStateMachine(session_config, logger=logging.getLogger("pomodoro"))
    loop = SessionLoop(
        LoopDependencies(
            machine=machine,
            keys=keys,
            renderer=renderer,
            effects=effects,
            logger=logging.getLogger("runtime"),
            poll_interval_seconds=app_config.terminal.poll_interval_ms / 1000.0,
        )
    )
    return loop.run()


def main() -> int:
    """Run the terminal pomodoro timer."""
    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        setup_logging()
        logging.getLogger("pomodoro_tui").error(f"App configuration error: {error}")
        return 1

    logger = setup_logging(
        level=getattr(logging, app_config.logging.level, logging.WARNING),
        log_file=app_config.logging.file,
    )
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)
    else:
        logger.info("No config file at %s; using defaults", resolve_config_path())

    try:
        alert_config = AlertConfig.from_settings(app_config.alerts)
    except AlertConfigurationError as error:
        logger.error(f"Alert configuration error: {error}")
        return 1

    effects = build_effect_dispatcher(alert_config, logger)

    apply_system_locale(logger)
    with hold_console_logging():
        exit_code = curses.wrapper(run_session, app_config, effects, logger)
    if exit_code == 0:
        print("\n✓ Pomodoro session completed!\n")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Single-writer owner of one game's ClockState.

The engine's functions are pure; ``ClockSession`` is where they get applied.
All commands and ticks go through one lock so they can't interleave, and
every call ends by publishing a fresh snapshot to subscribers. Timer
listeners are told when the clock enters or leaves RUNNING, which is how
the timing source knows to arm or disarm itself.
"""

import threading

from pclock.common.logger import log
from pclock.core import engine
from pclock.core.clock_state import ClockState, Mode
from pclock.core.engine import Command
from pclock.core.errors import InvalidTransition
from pclock.core.snapshot import build_snapshot


class ClockSession:

    def __init__(self, strict=False):
        self.strict = strict
        self._state = ClockState()
        self._lock = threading.RLock()
        self._subscribers = []
        self._timer_listeners = []

    @property
    def state(self):
        return self._state

    @property
    def mode(self):
        return self._state.mode

    @property
    def timer_armed(self):
        """True while the timing source should be delivering ticks."""
        return self._state.mode is Mode.RUNNING

    def snapshot(self):
        with self._lock:
            return build_snapshot(self._state)

    def allowed_commands(self):
        with self._lock:
            return engine.allowed_commands(self._state)

    # -- Listeners --

    def subscribe(self, callback):
        """Call ``callback(snapshot)`` after every command and tick."""
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def on_timer_change(self, callback):
        """Call ``callback(armed)`` whenever the clock enters or leaves RUNNING."""
        self._timer_listeners.append(callback)
        return callback

    # -- Commands --

    def initialize(self, config):
        # InvalidConfig propagates before anything is touched, whatever the mode.
        config.validate()
        return self._apply(Command.INITIALIZE, lambda state: engine.initialize(config))

    def start(self):
        return self._apply(Command.START, engine.start)

    def pause(self):
        return self._apply(Command.PAUSE, engine.pause)

    def toggle(self):
        """Play/pause button: pause if running, otherwise try to start."""
        with self._lock:
            if self._state.mode is Mode.RUNNING:
                return self.pause()
            return self.start()

    def tick(self):
        return self._apply(Command.TICK, engine.tick)

    def advance_turn(self):
        return self._apply(Command.ADVANCE_TURN, engine.advance_turn)

    def reset(self):
        return self._apply(Command.RESET, engine.reset)

    def _apply(self, command, transition):
        with self._lock:
            before = self._state
            if command not in engine.allowed_commands(before):
                if self.strict:
                    raise InvalidTransition(command, before.mode)
                log.debug(f"Ignoring '{command.value}' while {before.mode.value}")
                after = before
            else:
                after = transition(before)
            self._state = after

            if after.mode is not before.mode:
                log.info(f"Clock mode {before.mode.value} -> {after.mode.value} on '{command.value}'")

            # The timing source has to follow the mode even if a subscriber blows up.
            try:
                snap = build_snapshot(after)
                for callback in list(self._subscribers):
                    callback(snap)
            finally:
                was_armed = before.mode is Mode.RUNNING
                armed = after.mode is Mode.RUNNING
                if armed != was_armed:
                    for callback in list(self._timer_listeners):
                        callback(armed)
            return after

"""Turn/time transitions for the player clock, pure logic, no UI.

Every function takes a ``ClockState`` and returns a new one; nothing here
schedules anything or knows about wall-clock time. The caller feeds one
``tick`` per elapsed second while the clock is running and calls
``advance_turn`` when the active player hands over.

All transitions are total. A command that doesn't make sense in the current
mode hands back the state it was given, only ``initialize`` can fail.
"""

from enum import Enum

from pclock.common.logger import log
from pclock.core.clock_state import ClockState, Mode, Player


class Command(str, Enum):
    INITIALIZE = "initialize"
    START = "start"
    PAUSE = "pause"
    TICK = "tick"
    ADVANCE_TURN = "advance_turn"
    RESET = "reset"


# Harmless everywhere: no-ops outside the mode they act on.
_ALWAYS_ALLOWED = frozenset({Command.PAUSE, Command.TICK, Command.RESET})


def _can_start(state):
    if state.mode not in (Mode.READY, Mode.PAUSED):
        return False
    active = state.active_player
    return active is not None and state.is_eligible(active)


def allowed_commands(state):
    """Commands that do something meaningful in ``state``'s mode."""
    allowed = set(_ALWAYS_ALLOWED)
    if state.mode is Mode.UNINITIALIZED:
        allowed.add(Command.INITIALIZE)
    if _can_start(state):
        allowed.add(Command.START)
    if state.mode in (Mode.RUNNING, Mode.PAUSED) and state.active_index is not None:
        allowed.add(Command.ADVANCE_TURN)
    return frozenset(allowed)


def initialize(config):
    """Build a READY state from ``config``; raises InvalidConfig if out of range."""
    config.validate()
    players = tuple(
        Player(id=i + 1, time_left_seconds=config.seconds_per_player, is_active=(i == 0))
        for i in range(config.player_count)
    )
    log.info(
        f"Initialized clock with {config.player_count} players, {config.seconds_per_player}s each, "
        f"+{config.increment_seconds}s increment, elimination {'on' if config.elimination_mode else 'off'}"
    )
    return ClockState(
        players=players,
        mode=Mode.READY,
        elimination_mode=config.elimination_mode,
        increment_seconds=config.increment_seconds,
        initial_seconds_per_player=config.seconds_per_player,
    )


def start(state):
    if not _can_start(state):
        log.debug(f"Ignoring start while {state.mode.value}")
        return state
    log.debug(f"Started clock for player {state.active_player.id}")
    return state.with_mode(Mode.RUNNING)


def pause(state):
    if state.mode is not Mode.RUNNING:
        return state
    log.debug("Paused clock")
    return state.with_mode(Mode.PAUSED)


def tick(state):
    """One second elapsed for the active player.

    Time floors at 0. The tick that takes a player from 1 to 0 pauses the
    clock and, in elimination mode, knocks the player out. Ticks at 0 leave
    the state alone until someone advances the turn.
    """
    if state.mode is not Mode.RUNNING:
        return state
    index = state.active_index
    if index is None:
        log.warning("Received a tick while running with no active player, ignoring")
        return state

    player = state.players[index]
    if player.time_left_seconds <= 0:
        return state

    remaining = player.time_left_seconds - 1
    if remaining > 0:
        return state.with_player(index, time_left_seconds=remaining)

    # Crossed into zero on this tick
    state = state.with_player(index, time_left_seconds=0, is_out=state.elimination_mode)
    if state.elimination_mode:
        log.info(f"Player {player.id} ran out of time and is eliminated")
    else:
        log.info(f"Player {player.id} ran out of time")
    return state.with_mode(Mode.PAUSED)


def _next_eligible_index(state, current):
    count = len(state.players)
    # With a single player the scan wraps back onto itself.
    offsets = range(1, count) if count > 1 else range(1, 2)
    for offset in offsets:
        j = (current + offset) % count
        if state.is_eligible(state.players[j]):
            return j
    return None


def advance_turn(state):
    """Hand the clock from the active player to the next eligible one.

    The player leaving the active slot gets the increment if they still
    have time; with elimination off an expired player gets a fresh budget
    instead. The next player is found round-robin, skipping anyone out, and
    the clock runs for them. If nobody is left the game goes TERMINAL.
    """
    if state.mode not in (Mode.RUNNING, Mode.PAUSED):
        log.debug(f"Ignoring advance_turn while {state.mode.value}")
        return state
    current = state.active_index
    if current is None:
        log.debug("Ignoring advance_turn with no active player")
        return state

    player = state.players[current]
    if player.time_left_seconds > 0:
        time_left = player.time_left_seconds + state.increment_seconds
    elif not state.elimination_mode:
        time_left = state.initial_seconds_per_player
    else:
        time_left = 0
    state = state.with_player(current, time_left_seconds=time_left, is_active=False)

    nxt = _next_eligible_index(state, current)
    if nxt is None:
        log.info(f"No eligible players remain after player {player.id}, game over")
        return state.with_mode(Mode.TERMINAL)

    log.debug(f"Advanced turn from player {player.id} to player {state.players[nxt].id}")
    return state.with_player(nxt, is_active=True).with_mode(Mode.RUNNING)


def reset(state):
    log.info(f"Reset clock from {state.mode.value}")
    return ClockState()

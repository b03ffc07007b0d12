"""Clock data model: players, modes and the immutable ClockState.

Nothing in here changes game state on its own. Every transition lives in
``pclock.core.engine``; this module only offers read helpers and
``with_*`` constructors that return modified copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Mode(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class Player:
    id: int
    time_left_seconds: int
    is_active: bool = False
    is_out: bool = False


@dataclass(frozen=True)
class ClockState:
    players: tuple[Player, ...] = ()
    mode: Mode = Mode.UNINITIALIZED
    elimination_mode: bool = False
    increment_seconds: int = 0
    initial_seconds_per_player: int = 0

    # -- Controlled construction --

    def with_players(self, players) -> ClockState:
        return replace(self, players=tuple(players))

    def with_mode(self, mode: Mode) -> ClockState:
        return replace(self, mode=mode)

    def with_player(self, index: int, **changes) -> ClockState:
        """Copy of the state with ``players[index]`` updated by ``changes``."""
        players = list(self.players)
        players[index] = replace(players[index], **changes)
        return self.with_players(players)

    # -- Read helpers --

    @property
    def active_index(self) -> int | None:
        for i, player in enumerate(self.players):
            if player.is_active:
                return i
        return None

    @property
    def active_player(self) -> Player | None:
        index = self.active_index
        return None if index is None else self.players[index]

    def is_eligible(self, player: Player) -> bool:
        """Whether ``player`` may still take turns."""
        return not self.elimination_mode or not player.is_out

    @property
    def eligible_players(self) -> tuple[Player, ...]:
        return tuple(p for p in self.players if self.is_eligible(p))

    @property
    def winner(self) -> Player | None:
        # Only an elimination game that ran out of opponents has a winner.
        if self.mode is not Mode.TERMINAL or not self.elimination_mode:
            return None
        remaining = self.eligible_players
        return remaining[0] if len(remaining) == 1 else None

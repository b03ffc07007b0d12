from pclock.util import format_clock

OUT_LABEL = "Out"
LOST_LABEL = "Lost"

# Display label for one player's remaining time. Zero means expired, eliminated players read "Out" and players
# waiting on a fresh budget read "Lost".
def format_remaining(player):
    if player.is_out:
        return OUT_LABEL
    if player.time_left_seconds <= 0:
        return LOST_LABEL
    return format_clock(player.time_left_seconds)

# Builds the read-only view handed to the presentation layer after every command and tick. It's a fresh structure
# each time, so whatever the reader does with it can't reach back into the engine's state.
def build_snapshot(state):
    return {
        "mode": state.mode.value,
        "elimination_mode": state.elimination_mode,
        "players": [
            {
                "id": p.id,
                "time_left_seconds": p.time_left_seconds,
                "is_active": p.is_active,
                "is_out": p.is_out,
                "display": format_remaining(p),
            }
            for p in state.players
        ],
    }

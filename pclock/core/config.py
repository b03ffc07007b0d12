import json
from dataclasses import dataclass, asdict
from pclock.common.logger import log
from pclock.common.setup import PATHS
from pclock.core.errors import InvalidConfig


PLAYER_COUNTS = (2, 3, 4, 5, 6)

#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for the setup form. These only seed the form; a game is always started from an explicit config.
DEFAULTS = {
    "player_count": 2,
    "seconds_per_player": 300,
    "increment_seconds": 5,
    "elimination_mode": False,
}

# bool is a subclass of int, so True would otherwise pass as a player count of 1.
def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)

#endregion === Helpers and Paths ===

#region === Clock Configuration ===

# Everything needed to initialize a game. Building one never fails, validate() is what enforces the ranges.
@dataclass(frozen=True)
class ClockConfig:
    player_count: int = DEFAULTS["player_count"]
    seconds_per_player: int = DEFAULTS["seconds_per_player"]
    increment_seconds: int = DEFAULTS["increment_seconds"]
    elimination_mode: bool = DEFAULTS["elimination_mode"]

    # Raises InvalidConfig for anything initialize() can't honor.
    def validate(self):
        if not _is_int(self.player_count) or self.player_count not in PLAYER_COUNTS:
            raise InvalidConfig(f"player_count must be an integer from {PLAYER_COUNTS[0]} to {PLAYER_COUNTS[-1]}, got {self.player_count!r}")
        if not _is_int(self.seconds_per_player) or self.seconds_per_player < 0:
            raise InvalidConfig(f"seconds_per_player must be a non-negative integer, got {self.seconds_per_player!r}")
        if not _is_int(self.increment_seconds) or self.increment_seconds < 0:
            raise InvalidConfig(f"increment_seconds must be a non-negative integer, got {self.increment_seconds!r}")
        if not isinstance(self.elimination_mode, bool):
            raise InvalidConfig(f"elimination_mode must be a bool, got {self.elimination_mode!r}")
        return self

    def to_dict(self):
        return asdict(self)

    # Builds a config from a loosely typed dict (setup form, settings file), filling anything missing or mistyped
    # from DEFAULTS. Values that have the right type but a bad range are kept so validate() can report them.
    @classmethod
    def from_settings(cls, settings):
        if not isinstance(settings, dict):
            log.warning(f"Expected a dict of clock settings, got {type(settings).__name__}, using defaults.")
            settings = {}

        values = {}
        defaulted_values = set()
        for key, default in DEFAULTS.items():
            value = settings.get(key, default)
            expected_ok = isinstance(value, bool) if isinstance(default, bool) else _is_int(value)
            if key not in settings or not expected_ok:
                defaulted_values.add(key)
                value = default
            values[key] = value

        if defaulted_values:
            defaulted = ", ".join(sorted(defaulted_values))
            log.debug(f"Built clock config with defaulted values: {defaulted}")
        return cls(**values)

#endregion === Clock Configuration ===

#region === Remembered Setup Form ===

# Loads the last-used setup form values from settings.json. Missing or broken files fall back to defaults.
def load_settings():
    if not SETTINGS_PATH.exists():
        log.info(f"No settings file at '{SETTINGS_PATH}', using default clock settings.")
        return ClockConfig()
    try:
        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            settings = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        log.warning(f"Failed to read '{SETTINGS_PATH}', falling back to default clock settings.", exc_info=True)
        return ClockConfig()

    config = ClockConfig.from_settings(settings)
    try:
        config.validate()
    except InvalidConfig:
        log.warning(f"Settings in '{SETTINGS_PATH}' are out of range, falling back to default clock settings.", exc_info=True)
        return ClockConfig()
    log.info(f"Loaded clock settings from '{SETTINGS_PATH}'.")
    return config

# Writes the given config as the remembered setup form values.
def save_settings(config):
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    log.info(f"Saved clock settings to '{SETTINGS_PATH}'")

#endregion === Remembered Setup Form ===

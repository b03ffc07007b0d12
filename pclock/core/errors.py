"""Errors surfaced by the clock core."""


class InvalidConfig(ValueError):
    """Raised by ``initialize`` when the game configuration is out of range.

    No state is produced or changed when this is raised.
    """


class InvalidTransition(RuntimeError):
    """A command was issued in a mode that can't honor it.

    The engine treats these as no-ops; only a strict ``ClockSession`` raises it.
    """

    def __init__(self, command, mode):
        self.command = command
        self.mode = mode
        super().__init__(f"Command '{command.value}' is not allowed while the clock is '{mode.value}'")

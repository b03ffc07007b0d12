from .misc import format_clock, parse_time_input

__all__ = ["format_clock", "parse_time_input"]

# Formats a remaining-time budget as MM:SS, zero padded. Minutes aren't capped at 59, so a 2 hour budget
# renders as 120:00. Negative input clamps to zero.
def format_clock(seconds):
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


# Parses the time field of the setup form into whole seconds. Accepts "H:MM:SS", "M:SS" or a bare number of
# seconds. Returns None for anything unparseable or negative.
def parse_time_input(text):
    parts = str(text).strip().split(":")
    try:
        if len(parts) == 3:
            seconds = int(parts[0]) * 3600 + int(parts[1]) * 60 + int(parts[2])
        elif len(parts) == 2:
            seconds = int(parts[0]) * 60 + int(parts[1])
        elif len(parts) == 1:
            seconds = int(parts[0])
        else:
            return None
    except ValueError:
        return None
    if seconds < 0 or any(p.strip().startswith("-") for p in parts):
        return None
    return seconds

import os
from pathlib import Path
from dataclasses import dataclass

# Lil helper function to create missing directories.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path

    @staticmethod
    def build():
        # Folder for user-specific stuff (logs, remembered setup form). PLAYERCLOCK_HOME wins if set.
        home = os.getenv("PLAYERCLOCK_HOME")
        if home:
            data = ensure_directory(Path(home))
        else:
            data = ensure_directory(Path.home() / ".playerclock")

        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()

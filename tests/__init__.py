import os
import tempfile

# Keep logs and remembered settings out of the real home directory while testing.
os.environ.setdefault("PLAYERCLOCK_HOME", tempfile.mkdtemp(prefix="playerclock_tests_"))

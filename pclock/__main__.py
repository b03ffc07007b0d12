import sys
from pclock.common.logger import log
from pclock.ui.app import main

# Entry point for `python -m pclock` and the `playerclock` script
def run() -> None:
    try:
        log.info("=== STARTED NEW PLAYER CLOCK SESSION ===")
        main()
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()

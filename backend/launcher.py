"""Unit Converter desktop launcher — starts the server and opens the browser."""

from __future__ import annotations

import os
import socket
import sys
import threading
import time
import traceback
import webbrowser


def _get_log_path() -> str:
    """Return a path for the crash log next to the exe."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.join(os.path.dirname(sys.executable), "converter_crash.log")
    return os.path.join(os.path.dirname(__file__), "converter_crash.log")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def wait_for_server(port: int, attempts: int = 50) -> bool:
    """Poll until something accepts connections on ``port``."""
    for _ in range(attempts):
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=0.1):
                return True
        except OSError:
            time.sleep(0.1)
    return False


def open_browser(port: int) -> None:
    if wait_for_server(port):
        webbrowser.open(f"http://127.0.0.1:{port}")


def main(argv: list[str]) -> None:
    import uvicorn
    from app.config import settings

    port = find_free_port()
    print(f"Starting {settings.app_name} on http://127.0.0.1:{port}")
    print("Close this window or press Ctrl+C to stop.\n")

    if "--no-browser" not in argv:
        threading.Thread(target=open_browser, args=(port,), daemon=True).start()

    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except Exception:
        err = traceback.format_exc()
        print(err)
        try:
            with open(_get_log_path(), "w") as f:
                f.write(err)
            print(f"\nCrash log saved to: {_get_log_path()}")
        except OSError as log_err:
            print(f"\nCould not write crash log: {log_err}")
        print("\n--- Unit Converter crashed. Press Enter to close. ---")
        try:
            input()
        except EOFError:
            pass
        sys.exit(1)

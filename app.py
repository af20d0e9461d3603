import os
import socket

from marketing_browser.logging_config import configure_logging
from marketing_browser.ui.dash_app import create_dash_app

configure_logging()

CONFIG_ROOT = os.getenv("MARKETING_BROWSER_CONFIG_ROOT", "config")

app = create_dash_app(CONFIG_ROOT)
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port at or above start_port that nothing is listening on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        print(f"Warning: Port {preferred_port} was taken. Starting on {port}")

    app.run(host=os.getenv("HOST", "127.0.0.1"), port=port, debug=debug)


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
import os
import socket

from dash import Dash

from ss58_viewer.logging_config import configure_logging
from ss58_viewer.ui.dash_app import create_dash_app

logger = logging.getLogger(__name__)


def find_free_port(start_port: int) -> int:
    """Finds an available port starting from start_port."""
    port = start_port
    while port < start_port + 100:  # Try up to 100 ports
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
        port += 1
    return start_port


def run(app: Dash) -> None:
    # 1. Preferred port from env or default to 8050
    preferred_port = int(os.getenv("PORT", "8050"))

    # 2. If it is taken, move to the next free one
    final_port = find_free_port(preferred_port)

    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Port taken; starting on the next free port",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    app.run(host="0.0.0.0", port=final_port, debug=debug)


def main() -> None:
    """Console entry point: ss58-viewer."""
    configure_logging()
    run(create_dash_app(os.getenv("SS58_VIEWER_CONFIG", "config")))


if __name__ == "__main__":
    main()

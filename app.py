import os

from ss58_viewer.logging_config import configure_logging
from ss58_viewer.server import run
from ss58_viewer.ui.dash_app import create_dash_app

configure_logging()

app = create_dash_app(os.getenv("SS58_VIEWER_CONFIG", "config"))
server = app.server


if __name__ == "__main__":
    run(app)

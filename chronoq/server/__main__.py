"""Run the chronoq server: python -m chronoq.server"""

import uvicorn

from chronoq.logs import configure_logging
from chronoq.server.app import app

configure_logging("INFO")
uvicorn.run(app, host="0.0.0.0", port=8080)

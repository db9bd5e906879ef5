"""
Holiday Hopper – main application entry point

* Flask app + Socket.IO; the browser page forwards keystrokes and clicks on
  the `/explore/ws` namespace and draws whatever view the server sends back.
* Runs on the threading async mode: no eventlet/gevent required.
"""

import logging

from dotenv import load_dotenv

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from holiday_hopper.api.config import get_port  # noqa: E402
from holiday_hopper.app import create_app  # noqa: E402

app, socketio = create_app()

# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting Holiday Hopper on http://localhost:%d", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=False, allow_unsafe_werkzeug=True)

__all__ = ["app", "socketio"]

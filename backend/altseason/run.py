import logging

import uvicorn

from altseason.config import Settings
from altseason.main import create_app

log = logging.getLogger("altseason")

def main() -> None:
    # Build the app exactly once; altseason.main creates nothing at import time.
    settings = Settings.from_env()
    app = create_app(settings)
    log.info("Backend running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()

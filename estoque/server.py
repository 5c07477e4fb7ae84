# estoque/server.py
import logging

import uvicorn

from .config import Settings
from .logs import LOGGER_NAME, configure_logging
from .main import API_PREFIX, create_app

log = logging.getLogger(f"{LOGGER_NAME}.server")


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)

    log.info("listening on http://%s:%d", settings.host, settings.port)
    log.info("endpoints:")
    for method, path in (
        ("GET", API_PREFIX),
        ("GET", f"{API_PREFIX}/{{id}}"),
        ("POST", API_PREFIX),
        ("PUT", f"{API_PREFIX}/{{id}}"),
        ("DELETE", f"{API_PREFIX}/{{id}}"),
    ):
        log.info("- %s %s", method, path)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

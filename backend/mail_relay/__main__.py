import logging
import logging.config

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from mail_relay.core.settings import settings

log = logging.getLogger("uvicorn.error")


def main():
    # uvicorn.run applies the same config; loading it first lets these lines through
    logging.config.dictConfig(LOGGING_CONFIG)
    log.info(f"[main] server running on port {settings.port}")
    log.info(f"[main] server URL: http://localhost:{settings.port}")
    uvicorn.run("mail_relay.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

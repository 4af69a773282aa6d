# parcel_tracker/main.py
import logging

import uvicorn

from .config import settings


def configure_logging(level: str = settings.log_level):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == '__main__':
    configure_logging()
    uvicorn.run('parcel_tracker.api:app', host=settings.host, port=settings.port, log_level=settings.log_level)

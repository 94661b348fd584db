import logging

from watchdog_checks.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    # SQL echo is controlled by the engine, keep the logger quiet otherwise
    if not settings.debug_mode:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

import logging

HANDLER_NAME = "weatherdash"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Installs a single stream handler on the root logger.
    Calling it again (e.g. on reload) does not add a second handler.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

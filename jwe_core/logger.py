import logging, json, sys, time, os

from .constants import ENV_LOG_FILE, ENV_LOG_LEVEL, LOGGER_ROOT


def logger_name(component=None):
    if not component:
        return LOGGER_ROOT
    if component == LOGGER_ROOT or component.startswith(LOGGER_ROOT + "."):
        return component
    return f"{LOGGER_ROOT}.{component}"


def get_logger(component=None, level=None, to_file=None):
    """
    Structured JSON-line logger for a jwe_core component.

    `component` is nested under the package root ("Parser" -> "JWE.Parser").
    Level and file fall back to JWE_LOG_LEVEL / JWE_LOG_FILE.
    """
    logger = logging.getLogger(logger_name(component))
    logger.setLevel(level or os.getenv(ENV_LOG_LEVEL, "INFO").upper())
    to_file = to_file or os.getenv(ENV_LOG_FILE)

    if not logger.handlers:
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC

        handlers = [logging.StreamHandler(sys.stdout)]
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            handlers.append(logging.FileHandler(to_file))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger

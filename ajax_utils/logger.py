# ajax_utils/logger.py - shared logger factory for the ajax client
import logging

from ajax_utils import settings


def get_logger(name: str = "ajax-client"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.log_level())
    return logger

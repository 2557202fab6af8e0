import logging
import os

def setup_logger():
    formatter = logging.Formatter(fmt='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

    logger = logging.getLogger("slackconnect")

    logger.setLevel(os.getenv("SLACKCONNECT_LOG_LEVEL", "DEBUG").upper())

    if not logger.handlers:
        handler = logging.StreamHandler()

        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger

import logging

from CILV.config import ViewerSettings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "cilv.log"


def configure_logging(settings: ViewerSettings) -> logging.Logger:
    """
    Send the package's log records to a file

    The terminal belongs to the UI, so nothing is logged to stdout/stderr.
    Calling this more than once does not add duplicate handlers.
    """
    logger = logging.getLogger("CILV")
    logger.setLevel(settings.log_level.upper())

    if not logger.handlers:
        settings.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_directory / LOG_FILE_NAME)

        formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

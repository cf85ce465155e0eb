import logging
import sys


LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
HANDLER_NAME = "ascii_raster.console"


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)
    # Replace our own handler on repeated calls, leave any others alone
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    # Quiet noisy loggers
    logging.getLogger("PIL").setLevel(logging.WARNING)

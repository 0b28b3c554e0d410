"""Logging utilities."""

import logging


def setup_logging(log_level: int | str = logging.INFO) -> logging.Logger:
    """Sets up logging for command-line use of the numeric tower.

    Library modules only create named loggers; handlers are installed here.

    Args:
        log_level (int | str): The logging level to use, as a number or a level name.

    Returns:
        logging.Logger: The root logger.
    """
    if isinstance(log_level, str):
        level_name = log_level.upper()
        if level_name not in logging.getLevelNamesMapping():
            error_message = f"Unknown log level: {log_level}"
            raise ValueError(error_message)
        log_level = logging.getLevelNamesMapping()[level_name]

    logger = logging.getLogger()
    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)

    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s,%(msecs)03d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger

import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

def setup_logging(level=logging.INFO, log_file=None):
    """Send the messages of the 'curvelab' loggers to stdout, and optionally
    to a file. The library itself never installs handlers: this is for
    applications that want to see what the editor is doing.

    Calling this again replaces the handlers installed by an earlier call.

    Parameters:
        level: logging level, e.g. logging.DEBUG to see every point edit.
        log_file: if not None, path of a file to write the log to (it is
            overwritten).

    Returns: the 'curvelab' logger."""
    logger = logging.getLogger('curvelab')
    logger.setLevel(level)
    logger.handlers.clear()
    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger

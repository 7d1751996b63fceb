import logging
from catalog.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL):
    '''
    Sets up root logging for applications embedding the catalog.
    Package modules only create loggers and never call this themselves.
    Calling it again is a no-op once handlers exist.
    '''
    logging.basicConfig(level=level, format=LOG_FORMAT)

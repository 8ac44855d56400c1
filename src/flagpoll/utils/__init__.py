from .logs import setup_logging as setup_logging

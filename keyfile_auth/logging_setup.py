import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: Optional[bool] = None) -> None:
    """Configure root logging for processes embedding the key store.

    debug defaults to the DEBUG setting from the environment.
    """
    if debug is None:
        from keyfile_auth.config import get_config
        debug = get_config().debug

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    if debug:
        logging.getLogger("keyfile_auth").setLevel(logging.DEBUG)

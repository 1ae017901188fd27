"""
Logging helpers.
"""


# std
import contextlib as ctx

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
@ctx.contextmanager
def enabled(*libraries):
    """
    Temporarily enable logging for `libraries`, by default only `bytekit`.
    Logging for this package is disabled on import.
    """
    libraries = libraries or ('bytekit', )
    for lib in libraries:
        logger.enable(lib)

    try:
        yield

    finally:
        # re-disable
        for lib in libraries:
            logger.disable(lib)

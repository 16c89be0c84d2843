import contextlib
import logging
import time


@contextlib.contextmanager
def status_block(title, logger=None, level=logging.DEBUG):
    """ Log how long the enclosed block took. """
    if logger is None:
        logger = logging.getLogger("meshdraw")
    logger.log(level, "%s...", title)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.log(level, "%s took %0.3f s", title, elapsed)

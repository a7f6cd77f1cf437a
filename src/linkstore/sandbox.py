import os
import runpy
from loguru import logger


def include_file_sandbox(path: str) -> bool:
    """Run a user-supplied Python file in its own namespace.

    Returns True if the file ran to completion, False if it is missing or raised.
    """
    if not os.path.isfile(path):
        return False
    try:
        runpy.run_path(path, run_name="__shortlink_sandbox__")
    except Exception as e:
        logger.error("Error while including {}: {}", path, e)
        return False
    return True

import re
from loguru import logger

_VERSION_JUNK = re.compile(r"(^[^0-9]*)|[^0-9.].*")


def normalize_server_version(raw: str) -> str:
    """Reduce a raw server version string to its leading dotted number.

    Drops everything that is not a number at the start of the string, then
    everything from the first character that is neither a digit nor a dot:
      'omgmysql-5.5-ubuntu-4.20' => '5.5'
      'mysql5.5-ubuntu-4.20'     => '5.5'
      '5.5-ubuntu-4.20'          => '5.5'
      '5.5-beta2'                => '5.5'
      '5.5'                      => '5.5'
    """
    version = _VERSION_JUNK.sub("", raw or "")
    logger.debug("normalize_server_version: {!r} -> {!r}", raw, version)
    return version


def identity(text: str) -> str:
    """Default translation lookup: return the message key unchanged."""
    return text

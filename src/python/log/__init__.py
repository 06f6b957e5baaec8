from log import logger

Logger = logger.Logger

_LOGGER = logger.Logger()

debug = _LOGGER.debug
info = _LOGGER.info
warning = _LOGGER.warning
error = _LOGGER.error
set_log_directory = _LOGGER.set_log_directory

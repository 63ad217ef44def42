import logging
import sys
from typing import List, Optional

LOGGER_NAME = "siggen"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
	"""Attach handlers to the ``siggen`` logger and return it.

	Records go to stderr (and ``log_file`` when given) so stdout stays free
	for data. Calling this again replaces the handlers installed earlier.
	"""
	logger = logging.getLogger(LOGGER_NAME)
	for h in list(logger.handlers):
		logger.removeHandler(h)
		h.close()

	formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
	handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
	if log_file:
		handlers.append(logging.FileHandler(log_file))
	for h in handlers:
		h.setFormatter(formatter)
		logger.addHandler(h)

	logger.setLevel(getattr(logging, level.upper(), logging.INFO))
	logger.propagate = False
	return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
	return logging.getLogger(name or LOGGER_NAME)

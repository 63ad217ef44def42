import logging

import pytest

from siggen.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_siggen_logger():
	yield
	logger = logging.getLogger(LOGGER_NAME)
	for h in list(logger.handlers):
		logger.removeHandler(h)
		h.close()
	logger.propagate = True
	logger.setLevel(logging.NOTSET)

"""
Logging configuration for the formula helper API.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "backend.app"


def setup_logging(level: int | str = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
	"""
	Configures the logger for the 'backend.app' namespace.

	Args:
		level: Logging level, either a number (logging.DEBUG) or a name ("DEBUG").
		log_file: Optional path to also write logs to a file.
	"""
	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO

	logger = logging.getLogger(LOGGER_NAMESPACE)
	logger.setLevel(level)

	# Avoid duplicate handlers when uvicorn reloads the app
	if logger.hasHandlers():
		logger.handlers.clear()

	formatter = logging.Formatter(
		'%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		datefmt='%H:%M:%S'
	)

	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)

	if log_file:
		file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)

	logger.info("Logging initialized.")
	return logger

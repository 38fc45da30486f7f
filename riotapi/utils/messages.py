import logging

ROOT_LOGGER = "riotapi"


class MessagePrint:
	"""
	Gives a class its own logger and shorthand logging classmethods.

	The base class logs to the library root logger, so `set_logger_level`
	called on it applies to every module.

	Subclasses set `logger` to their module logger.
	"""

	logger = logging.getLogger(ROOT_LOGGER)

	@classmethod
	def set_logger_level(cls, level: int):
		return cls.logger.setLevel(level)

	@classmethod
	def debug(cls, msg: str, *args, **kwargs):
		cls.logger.debug(msg, *args, **kwargs)

	@classmethod
	def info(cls, msg: str, *args, **kwargs):
		cls.logger.info(msg, *args, **kwargs)

	@classmethod
	def warning(cls, msg: str, *args, **kwargs):
		cls.logger.warning(msg, *args, **kwargs)


def set_debug(enabled: bool):
	"""Switches the whole library logger between DEBUG and its inherited level."""
	MessagePrint.set_logger_level(logging.DEBUG if enabled else logging.NOTSET)

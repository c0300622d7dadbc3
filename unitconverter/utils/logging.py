import logging

logger = logging.getLogger("unitconverter")
logger.addHandler(logging.NullHandler())


def GetLogger():
    return logger


def Warn(message):
    logger.warning(message)


def Info(message):
    logger.info(message)


def Debug(message):
    logger.debug(message)


def Error(message):
    logger.error(message)


def Critical(message):
    logger.critical(message)


def SetLoggingLevel(level):
    """Sets the level of the package logger.

    :param level: A logging level, either numeric or a name such as ``"DEBUG"``.
    :type level: int or str
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

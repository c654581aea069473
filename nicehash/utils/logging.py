# -*- coding: utf-8 -*-

"""
Scoped logging package.
"""

__version__ = "0.7.0"
__license__ = "http://opensource.org/licenses/MIT"
__all__ = ['Logger', 'DummyLogger', 'StreamLogger', 'ChildLogger',
           'NOTSET', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

import abc
import sys
import logging
import inspect
import datetime

from typing import TextIO

NOTSET = logging.NOTSET
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

HANDLER_NAME = 'nicehash.stream'
"""
Name given to handlers installed by :class:`StreamLogger`, so that only those are replaced on reconfiguration.
"""


class Logger(abc.ABC):
    """Abstract logger."""

    @abc.abstractmethod
    def log(self, level: int, message: str, scope: object=None, stack_depth: int=0):
        """
        Log a message at a given level.

        Arguments:
            level:        Logging level (DEBUG .. CRITICAL).
            message:      The message to log.
            scope:        Optionally override default logger scope if not None. Can be an object or a string, eg. self
                          or __name__. Prepended to method names in log entries for loggers that support it.
            stack_depth:  Additional stack depth to trace back for the calling method name (default 0). Useful when
                          calling from inside a helper method but wanting to log the outer method name.
        """

    @abc.abstractmethod
    def debug(self, message: str, *args, stack_depth: int=0, verbosity: int=0):
        """
        Log a message at DEBUG level, with formatting.

        Arguments:
            message:        Message to log. Can include format string syntax as per str.format().
            *args:          Format string positional arguments for 'message'.
            stack_depth:    See 'stack_depth' in :meth:`log`,
            verbosity:      Output is silenced if greater than configured verbosity for loggers that support it.
        """

    @abc.abstractmethod
    def info(self, message: str, *args, stack_depth: int=0):
        """
        Log a message at INFO level, with formatting.
        """

    @abc.abstractmethod
    def warning(self, message: str, *args, stack_depth: int=0):
        """
        Log a message at WARNING level, with formatting.
        """

    @abc.abstractmethod
    def error(self, message: str, *args, stack_depth: int=0):
        """
        Log a message at ERROR level, with formatting.
        """

    @abc.abstractmethod
    def critical(self, message: str, *args, stack_depth: int=0):
        """
        Log a message at CRITICAL level, with formatting.
        """

    @property
    @abc.abstractmethod
    def level(self):
        """int: The configured minimum level of this logger."""

    @property
    @abc.abstractmethod
    def debug_verbosity(self):
        """int: The configured debug verbosity of this logger."""


class DummyLogger (Logger):
    """
    Logger that does nothing.

    Used as a default logger for methods and classes that require one, to make logging optional.
    """

    def log(self, level: int, message: str, scope: object=None, stack_depth: int=0):
        pass

    def debug(self, message: str, *args, stack_depth: int=0, verbosity: int=0):
        pass

    def info(self, message: str, *args, stack_depth: int=0):
        pass

    def warning(self, message: str, *args, stack_depth: int=0):
        pass

    def error(self, message: str, *args, stack_depth: int=0):
        pass

    def critical(self, message: str, *args, stack_depth: int=0):
        pass

    @property
    def level(self):
        return NOTSET

    @property
    def debug_verbosity(self):
        return 0


class StreamLogger (Logger):
    """
    Logger writing formatted entries to a display stream and an optional log file.

    Entries are written synchronously through a :mod:`logging` logger, so this is safe to use from the event loop
    thread without a separate logger thread.

    Arguments:
        scope:            Calling object or module name. Can be an object or a string, eg. self or __name__. Prepended
                          to method names in log entries if set (default None).
        level:            Minimum logging level (default INFO).
        module_name:      Name of the underlying :mod:`logging` logger (default 'nicehash').
        filename:         If set, entries are also written to a FileHandler with this filename.
        stream:           Display stream (default stderr, keeping stdout free for command output).
        time_format:      Format of displayed time as passed to strftime() (default '%Y-%m-%dT%H:%M:%S:%f').
        inspect_stack:    If false, does not perform stack inspection to get the calling method name.
        debug_verbosity:  Debug messages with 'verbosity' higher than this are dropped (default 0).
    """

    def __init__(self, scope: object=None, level: int=INFO, module_name: str='nicehash', filename: str=None,
                 stream: TextIO=None, time_format: str='%Y-%m-%dT%H:%M:%S:%f', inspect_stack: bool=True,
                 debug_verbosity: int=0):

        self.scope = scope
        self.time_format = time_format
        self.inspect_stack = inspect_stack

        self._level = level
        self._debug_verbosity = debug_verbosity
        self._logger_string = '[{}][{}] {}:{} {}'

        self._logger = logging.getLogger(module_name)
        self._logger.setLevel(DEBUG)

        for handler in [h for h in self._logger.handlers if h.get_name() == HANDLER_NAME]:
            self._logger.removeHandler(handler)
            handler.close()

        handlers = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
        if filename is not None:
            handlers.append(logging.FileHandler(filename))

        for handler in handlers:
            handler.set_name(HANDLER_NAME)
            self._logger.addHandler(handler)

    @property
    def level(self):
        return self._level

    @property
    def debug_verbosity(self):
        return self._debug_verbosity

    def log(self, level: int, message: str, scope: object=None, stack_depth: int=0):
        if level < self._level:
            return

        caller_name, caller_lineno = self._get_caller(stack_depth + 1)

        scope = scope if scope else self.scope
        if scope is not None:
            scope_name = scope if isinstance(scope, str) else scope.__class__.__name__
            caller_name = '{}.{}'.format(scope_name, caller_name)

        time_string = datetime.datetime.now(datetime.timezone.utc).strftime(self.time_format)
        self._logger.log(level, self._logger_string.format(logging.getLevelName(level), time_string,
                                                           caller_name, caller_lineno, message))

    def _get_caller(self, stack_depth: int):
        """
        Get the name and line number of the calling method, 'stack_depth' frames above this logger.
        """

        if not self.inspect_stack:
            return ('(unknown)', 0)

        frame = inspect.currentframe()

        try:
            for _ in range(stack_depth + 1):
                if frame.f_back is None:
                    break
                frame = frame.f_back

            return (frame.f_code.co_name, frame.f_lineno)

        finally:
            del frame

    def debug(self, message: str, *args, stack_depth: int=0, verbosity: int=0):
        if verbosity <= self._debug_verbosity:
            self.log(DEBUG, message.format(*args), stack_depth=stack_depth + 1)

    def info(self, message: str, *args, stack_depth: int=0):
        self.log(INFO, message.format(*args), stack_depth=stack_depth + 1)

    def warning(self, message: str, *args, stack_depth: int=0):
        self.log(WARNING, message.format(*args), stack_depth=stack_depth + 1)

    def error(self, message: str, *args, stack_depth: int=0):
        self.log(ERROR, message.format(*args), stack_depth=stack_depth + 1)

    def critical(self, message: str, *args, stack_depth: int=0):
        self.log(CRITICAL, message.format(*args), stack_depth=stack_depth + 1)


class ChildLogger (Logger):
    """
    Logger forwarding to a parent :class:`Logger` under its own scope, and optionally a stricter level.

    Lets each client object log under its own class name while sharing the parent's handlers.

    Arguments:
        parent:           The parent logger instance.
        scope:            The scope of this logger, see 'scope' in :class:`StreamLogger`.
        level:            If set, the level of this logger (default None for same as parent).
        debug_verbosity:  If set, the debug verbosity of this logger (default None for same as parent).
    """

    def __init__(self, parent: Logger, scope: object, level: int=None, debug_verbosity: int=None):
        self.parent = parent
        self.scope = scope

        self._level = level if level is not None else parent.level
        self._debug_verbosity = debug_verbosity if debug_verbosity is not None else parent.debug_verbosity

    @property
    def level(self):
        return self._level

    @property
    def debug_verbosity(self):
        return self._debug_verbosity

    def log(self, level: int, message: str, scope: object=None, stack_depth: int=0):
        if level >= self._level:
            self.parent.log(level, message, scope if scope else self.scope, stack_depth + 1)

    def debug(self, message: str, *args, stack_depth: int=0, verbosity: int=0):
        if verbosity <= self._debug_verbosity:
            self.log(DEBUG, message.format(*args), stack_depth=stack_depth + 1)

    def info(self, message: str, *args, stack_depth: int=0):
        self.log(INFO, message.format(*args), stack_depth=stack_depth + 1)

    def warning(self, message: str, *args, stack_depth: int=0):
        self.log(WARNING, message.format(*args), stack_depth=stack_depth + 1)

    def error(self, message: str, *args, stack_depth: int=0):
        self.log(ERROR, message.format(*args), stack_depth=stack_depth + 1)

    def critical(self, message: str, *args, stack_depth: int=0):
        self.log(CRITICAL, message.format(*args), stack_depth=stack_depth + 1)

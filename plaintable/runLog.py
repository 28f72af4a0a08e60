# Copyright 2024 TerraPower, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module handles the diagnostic output (debug notes, warnings, errors) of
plaintable.

The default way of calling the global plaintable logger is to just import it:

.. code::

    from plaintable import runLog

You can then log things:

.. code::

    runLog.warning('something looks off', single=True)

Or change the log level:

.. code::

    runLog.setVerbosity('debug')

Messages sent with ``single=True`` are only emitted the first time their label
(or, by default, their text) is seen.

Everything is written to stderr unless ``LOG.startLog`` is given another stream,
so diagnostics never mix with a table rendered to stdout.
"""
import collections
import logging
import sys

# global constants
_WHITE_SPACE = " " * 7
SEP = "|"
LOGGER_NAME = "PLAINTABLE"


class _RunLog:
    """
    Handles all the logging.

    Until ``startLog`` is called, messages go to a ``NullLogger`` that still
    formats and de-duplicates them, but prints straight to stderr.
    """

    def __init__(self):
        self._verbosity = logging.INFO
        self.logLevels = None
        self._logLevelNumbers = []
        self.logger = None

        self.setNullLoggers()
        self._setLogLevels()

    def setNullLoggers(self):
        """Helper method to reset our logger to a Null handler."""
        self.logger = NullLogger("NULL")

    def _setLogLevels(self):
        """Fill the logLevels dict with the level numbers and their message prefixes."""
        # NOTE: use ordereddict so the levels stay ordered by severity
        self.logLevels = collections.OrderedDict(
            [
                ("debug", (logging.DEBUG, "[dbug] ")),
                ("info", (logging.INFO, "[info] ")),
                ("warning", (logging.WARNING, "[warn] ")),
                ("error", (logging.ERROR, "[err ] ")),
            ]
        )
        self._logLevelNumbers = sorted([l[0] for l in self.logLevels.values()])
        global _WHITE_SPACE
        _WHITE_SPACE = " " * max([len(l[1]) for l in self.logLevels.values()])

        # modify the logging module strings for printing
        for _longLogString, (logValue, shortLogString) in self.logLevels.items():
            logging.addLevelName(logValue, shortLogString)

    def log(self, msgType, msg, single=False, label=None):
        """
        This is a wrapper around logger.log() that does most of the work and is
        used by all message passers (debug, warning, error).
        """
        # users can optionally pass in custom strings ("debug") or level numbers
        msgLevel = msgType if isinstance(msgType, int) else self.logLevels[msgType][0]
        self.logger.log(msgLevel, str(msg), single=single, label=label)

    def getLogVerbosityRank(self, level):
        """Return integer verbosity rank given the string verbosity name."""
        try:
            return self.logLevels[level][0]
        except KeyError:
            log_strs = list(self.logLevels.keys())
            raise KeyError(
                "{} is not a valid verbosity level: {}".format(level, log_strs)
            )

    def setVerbosity(self, level):
        """
        Sets the minimum output verbosity for the logger.

        Parameters
        ----------
        level : int or str
            The level to set the log output verbosity to.
            Valid numbers are 0-50 and valid strings are keys of logLevels

        Examples
        --------
        >>> setVerbosity('debug') -> sets to 10
        >>> setVerbosity(0) -> sets to 10
        """
        if isinstance(level, str):
            self._verbosity = self.getLogVerbosityRank(level)
        elif isinstance(level, int):
            # snap to a canonical level, otherwise the logging module silently
            # drops nearly every message
            if level in self._logLevelNumbers:
                self._verbosity = level
            elif level < self._logLevelNumbers[0]:
                self._verbosity = self._logLevelNumbers[0]
            else:
                for i in range(len(self._logLevelNumbers) - 1, -1, -1):
                    if level >= self._logLevelNumbers[i]:
                        self._verbosity = self._logLevelNumbers[i]
                        break
        else:
            raise TypeError("Invalid verbosity rank {}.".format(level))

        if self.logger is not None:
            for handler in self.logger.handlers:
                handler.setLevel(self._verbosity)
            self.logger.setLevel(self._verbosity)

    def getVerbosity(self):
        """Return the global runLog verbosity."""
        return self._verbosity

    def startLog(self, name, stream=None):
        """Swap the null logger for a named one, writing to ``stream`` (stderr by default)."""
        self.logger = RunLogger(LOGGER_NAME + SEP + name, stream=stream)
        self.setVerbosity(self._verbosity)


# Here are the module-level functions that should be used for most outputs.
# They use the Log object behind the scenes.
def debug(msg, single=False, label=None):
    LOG.log("debug", msg, single=single, label=label)


def warning(msg, single=False, label=None):
    LOG.log("warning", msg, single=single, label=label)


def error(msg, single=False, label=None):
    LOG.log("error", msg, single=single, label=label)


def setVerbosity(level):
    LOG.setVerbosity(level)


def getVerbosity():
    return LOG.getVerbosity()


# ---------------------------------------


class DeduplicationFilter(logging.Filter):
    """
    Important logging filter

    * allow users to turn off duplicate messages
    * handles special indentation rules for our logs
    """

    def __init__(self, *args, **kwargs):
        logging.Filter.__init__(self, *args, **kwargs)
        self.singleMessageCounts = {}

    def filter(self, record):
        msg = str(record.msg)
        single = getattr(record, "single", False)
        label = getattr(record, "label", msg)
        label = msg if label is None else label

        if single:
            if label in self.singleMessageCounts:
                self.singleMessageCounts[label] += 1
                return False
            self.singleMessageCounts[label] = 1

        # multi-line messages are indented under their level prefix
        record.msg = msg.rstrip().replace("\n", "\n" + _WHITE_SPACE)
        return True


class RunLogger(logging.Logger):
    """Custom Logger to support giving users the option to de-duplicate messages."""

    FMT = "%(levelname)s%(message)s"

    def __init__(self, name, stream=None):
        logging.Logger.__init__(self, name.replace(SEP, "."))
        self.addFilter(DeduplicationFilter())

        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(RunLogger.FMT))
        self.setLevel(logging.INFO)
        self.addHandler(handler)

    def log(self, msgType, msg, single=False, label=None, **kwargs):
        """
        Log ``msg`` at the level named (or numbered) by ``msgType``, carrying the
        de-duplication data along on the record.
        """
        msgLevel = msgType if isinstance(msgType, int) else LOG.logLevels[msgType][0]
        logging.Logger.log(
            self, msgLevel, str(msg), extra={"single": single, "label": label}
        )


class NullLogger(RunLogger):
    """This is a placeholder for logging before ``startLog`` is called.

    It forwards all logging to stderr, but preserves the formatting and
    duplication tools of the library.
    """

    def __init__(self, name):
        RunLogger.__init__(self, name, stream=sys.stderr)

    def addHandler(self, *args, **kwargs):
        """Ensure this stays a null logger, with only the one stderr handler."""
        if not self.handlers:
            RunLogger.addHandler(self, *args, **kwargs)


def logFactory():
    """Create the default logging object."""
    return _RunLog()


LOG = logFactory()

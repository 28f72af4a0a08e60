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

"""
Globally accessible exception definitions for better granularity on exception behavior and exception handling behavior
"""


class TabulationError(Exception):
    """Base class for errors raised while building or configuring a table."""


class ColumnCountMismatch(TabulationError):
    """A row was added whose length differs from the number of columns the table expects."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        TabulationError.__init__(
            self,
            "Expected {} columns per row, but the row has {}.".format(expected, actual),
        )


class UnsupportedAlignment(TabulationError, ValueError):
    """An alignment character outside of l, c, r (either case) or space."""

    def __init__(self, value):
        self.value = value
        TabulationError.__init__(
            self, "char({!r}) is not a supported alignment.".format(value)
        )


class NullArgumentError(TabulationError, ValueError):
    """A required argument was None."""

    def __init__(self, argName):
        self.argName = argName
        TabulationError.__init__(
            self, "The argument `{}` may not be None.".format(argName)
        )


# ---------------------------------------------------


class SettingException(Exception):
    """Standardize behavior of setting-family errors"""

    def __init__(self, msg):
        Exception.__init__(self, msg)


class InvalidTableSettingsError(SettingException):
    """Table settings that do not pass schema validation"""

    def __init__(self, source, reason):
        self.source = source
        SettingException.__init__(
            self, "Invalid table settings from {}: {}".format(source, reason)
        )

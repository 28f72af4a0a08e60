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
How the text of a cell is padded out to the width of its column.

Alignments can be given either as :py:class:`Alignment` members or in a short
text form, where only the first character matters::

    >>> parseAlignment("r")
    <Alignment.RIGHT: 'r'>
    >>> parseAlignment("Center")
    <Alignment.CENTER: 'c'>
"""
from enum import Enum
from typing import Union

from plaintable.utils.customExceptions import NullArgumentError, UnsupportedAlignment


class Alignment(Enum):
    """Placement of cell text within its column."""

    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"

    @classmethod
    def _mapping(cls):
        # a blank is the same as "left"
        return {
            " ": cls.LEFT,
            "l": cls.LEFT,
            "c": cls.CENTER,
            "r": cls.RIGHT,
        }

    @classmethod
    def fromChar(cls, value: str) -> "Alignment":
        """Return the alignment for a single character, ignoring case."""
        try:
            return cls._mapping()[value.lower()]
        except KeyError:
            raise UnsupportedAlignment(value)


def parseAlignment(value: Union[Alignment, str, None]) -> Alignment:
    """
    Convert ``value`` into an :py:class:`Alignment`.

    Parameters
    ----------
    value : Alignment or str
        An alignment, or text whose first character is one of ``l``, ``c``, ``r``
        (either case) or a space. An empty string means left.

    Raises
    ------
    NullArgumentError
        If ``value`` is None.
    UnsupportedAlignment
        If the first character is not a known alignment.
    """
    if value is None:
        raise NullArgumentError("value")

    if isinstance(value, Alignment):
        return value

    if not value:
        return Alignment.LEFT

    return Alignment.fromChar(value[0])

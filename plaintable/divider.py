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

"""Horizontal rules drawn between the data rows of a table."""


class Divider:
    """
    A horizontal rule to insert at a row boundary.

    Parameters
    ----------
    index : int
        Where the rule goes. ``0`` is before the first row and ``rowCount`` is after
        the last. Negative values count back from the end, so ``-1`` is after the last
        row and ``-2`` is before it. Resolved against the row count at render time.
    char : str
        The single character the rule is drawn with.
    useColumnSeparator : bool
        If True, the table's column separator is written between the runs of ``char``.
        Otherwise the rule continues through the separator gap.
    """

    def __init__(self, index, char="-", useColumnSeparator=False):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(
                "A divider is drawn with a single character, not {!r}".format(char)
            )

        self.index = int(index)
        self.char = char
        self.useColumnSeparator = bool(useColumnSeparator)

    def __repr__(self):
        return "<Divider index={} char={!r} useColumnSeparator={}>".format(
            self.index, self.char, self.useColumnSeparator
        )

    def _key(self):
        return (self.index, self.char, self.useColumnSeparator)

    def __eq__(self, other):
        if not isinstance(other, Divider):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def resolveIndex(self, rowCount):
        """Return the absolute insertion point of this divider in a table of ``rowCount`` rows."""
        if self.index >= 0:
            return self.index

        return rowCount + self.index + 1

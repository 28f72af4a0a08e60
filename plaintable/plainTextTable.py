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
Render rows of text cells as fixed-width, aligned plain text.

Rows are added one at a time (or imported in bulk), and the table keeps track of
the widest cell seen in each column as they arrive. Rendering then pads every
cell out to the width of its column, interleaving any horizontal dividers::

    >>> table = PlainTextTable().separateBy(" | ").align(1, "r")
    >>> _ = table.addRow("Sun", "696000").addRow("Earth", "6371").addDivider(1, "=")
    >>> print(table, end="")
    Sun   | 696000
    ==============
    Earth |   6371

Nothing is wrapped or truncated, and widths are plain character counts.

A table is not safe to mutate from several threads at once. Rendering only
reads the table, so concurrent renders without concurrent writes are fine.
"""
import collections
import io

from plaintable import runLog
from plaintable.alignment import Alignment, parseAlignment
from plaintable.divider import Divider
from plaintable.utils.customExceptions import ColumnCountMismatch, NullArgumentError

DEFAULT_COLUMN_SEPARATOR = " "

ColumnState = collections.namedtuple("ColumnState", ["index", "length", "align"])


class PlainTextTable:
    """
    Takes sequences of text (each representing a row) and lays them out as fixed
    width columns.

    Parameters
    ----------
    rows : iterable of sequences of str, optional
        Rows to import straight away.
    columnsExpected : int, optional
        The number of cells every row must have. If this is not given, it is
        inferred from the first row added.

    Notes
    -----
    The configuration methods return the table, so calls can be chained.
    """

    def __init__(self, rows=None, columnsExpected=None):
        self._rows = []
        self._columnsExpected = -1
        self._maxColumnLengths = []

        self.columnSeparator = DEFAULT_COLUMN_SEPARATOR
        """The string written between two cells on the same line"""

        self.trimTrailingWhitespace = False
        """When True, the rightmost column is not padded out with trailing spaces"""

        self.alignments = {}
        """Alignment overrides by column index; other columns are left aligned"""

        self.dividers = []
        """Dividers to draw, resolved against the row count at render time"""

        if columnsExpected is not None:
            if columnsExpected <= 0:
                raise ValueError(
                    "The expected number of columns must be positive, not {}".format(
                        columnsExpected
                    )
                )
            self._columnsExpected = columnsExpected
            self._maxColumnLengths = [0] * columnsExpected

        if rows is not None:
            self.importRows(rows)

    @property
    def columnsExpected(self):
        """The number of cells each row must contain, or -1 before the first row."""
        return self._columnsExpected

    @property
    def maxColumnLengths(self):
        """The length of the longest cell seen so far in each column."""
        return list(self._maxColumnLengths)

    @property
    def rowCount(self):
        return len(self._rows)

    @property
    def rows(self):
        """
        The rows of data, in the order they will be rendered.

        Assigning to this resets the table and imports the new rows.
        """
        return list(self._rows)

    @rows.setter
    def rows(self, value):
        self.reset()

        if value is not None:
            self.importRows(value)

    def reset(self):
        """Drop all rows and forget the expected column count, keeping all other configuration."""
        runLog.debug("Resetting table with {} rows".format(len(self._rows)))
        self._rows = []
        self._columnsExpected = -1
        self._maxColumnLengths = []
        return self

    def trimTrailingSpace(self, value=True):
        """When True, trims any trailing whitespace from the rightmost column."""
        self.trimTrailingWhitespace = bool(value)
        return self

    def separateBy(self, value):
        """Set the string that separates two cells."""
        if value is None:
            raise NullArgumentError("value")

        self.columnSeparator = value
        return self

    def align(self, index, alignment):
        """
        Set the alignment of one column.

        Parameters
        ----------
        index : int
            The column index.
        alignment : Alignment or str
            See :py:func:`plaintable.alignment.parseAlignment` for the text forms.
        """
        self.alignments[index] = parseAlignment(alignment)
        return self

    def alignColumns(self, *alignments):
        """Set the alignments of the first ``len(alignments)`` columns, in order, e.g. ``alignColumns(*"lcr")``."""
        parsed = [parseAlignment(a) for a in alignments]
        for index, alignment in enumerate(parsed):
            self.alignments[index] = alignment

        return self

    def setDividers(self, dividers):
        """Replace the list of dividers."""
        self.dividers = list(dividers) if dividers is not None else []
        return self

    def addDivider(self, index, char="-", useColumnSeparator=False):
        """Add a divider at ``index``. See :py:class:`plaintable.divider.Divider`."""
        self.dividers.append(Divider(index, char, useColumnSeparator))
        return self

    def importRows(self, rows):
        """
        Call ``addRow`` for each item of ``rows``.

        The first bad row stops the import. Rows before it stay in the table.
        """
        for row in rows:
            self.addRow(*row)

        return self

    def addRow(self, *cells):
        """
        Add a row of cells to the table.

        The cells can be given one per argument, ``addRow("a", "b")``, or as a
        single list or tuple, ``addRow(["a", "b"])``.

        If the expected number of columns is not yet set, the first row added
        determines it. Later rows with a different number of cells raise
        :py:class:`ColumnCountMismatch` and leave the table untouched. An empty
        first row fixes the table at zero columns until it is reset.

        A cell of None is rendered as an empty string. Any other cell that is not
        a string raises a ``TypeError``, before the table is changed.
        """
        if len(cells) == 1 and isinstance(cells[0], (list, tuple)):
            cells = tuple(cells[0])

        for cell in cells:
            if cell is not None and not isinstance(cell, str):
                raise TypeError(
                    "Table cells must be str or None, not {}: {!r}".format(
                        type(cell).__name__, cell
                    )
                )

        count = len(cells)
        if count != self._columnsExpected:
            if self._columnsExpected > 0 or self._rows:
                raise ColumnCountMismatch(self._columnsExpected, count)

            # otherwise, this must be the first row we've encountered, so infer
            # the expected columns from it
            runLog.debug("Inferred {} columns from the first row".format(count))
            self._columnsExpected = count
            self._maxColumnLengths = [0] * count

        self._rows.append(cells)
        self._updateColumnMaxLengths(cells)

        return self

    def _updateColumnMaxLengths(self, cells):
        for i, cell in enumerate(cells):
            if cell is not None:
                self._maxColumnLengths[i] = max(self._maxColumnLengths[i], len(cell))

    def __str__(self):
        """Render the table to a string."""
        with io.StringIO() as writer:
            self.render(writer)
            return writer.getvalue()

    def render(self, stream):
        """
        Write the table to ``stream`` one line at a time.

        Parameters
        ----------
        stream : object
            Anything with a ``write(str)`` method, e.g. an open text file or ``sys.stdout``.
        """
        for line in self.renderLines():
            stream.write(line + "\n")

    def renderLines(self):
        """
        Yield each line of the rendered table, without line endings.

        Dividers are resolved against the current number of rows. At each
        insertion point from 0 to the row count, the dividers resolving to that
        point are drawn (in the order they were added), followed by the data row at
        that position, if there is one.
        """
        columns = self._getColumnStates()
        rowCount = len(self._rows)

        runLog.debug(
            "Rendering {} rows and {} dividers across {} columns".format(
                rowCount, len(self.dividers), len(columns)
            )
        )

        dividersByIndex = collections.defaultdict(list)
        for divider in self.dividers:
            position = divider.resolveIndex(rowCount)
            if 0 <= position <= rowCount:
                dividersByIndex[position].append(divider)
            else:
                runLog.warning(
                    "{} falls outside of a table with {} rows and will not be drawn".format(
                        divider, rowCount
                    ),
                    single=True,
                )

        for i in range(rowCount + 1):
            for divider in dividersByIndex.get(i, []):
                yield self._formatDividerLine(divider, columns)

            if i < rowCount:
                yield self._formatDataLine(self._rows[i], columns)

    def _getColumnStates(self):
        """Combine the tracked widths with each column's alignment (left, unless overridden)."""
        columns = []
        for i in range(max(self._columnsExpected, 0)):
            align = self.alignments.get(i)
            if align is None:
                align = Alignment.LEFT

            columns.append(ColumnState(i, self._maxColumnLengths[i], align))

        return columns

    def _formatDataLine(self, cells, columns):
        count = len(columns)
        return self.columnSeparator.join(
            self._formatCellText(i, count, cells[i], columns[i]) for i in range(count)
        )

    def _formatCellText(self, index, count, text, column):
        """Pad the text of one cell out to the width of its column."""
        if text is None:
            text = ""

        if len(text) == column.length:
            return text

        doPadRight = not self.trimTrailingWhitespace or index < count - 1
        if column.align == Alignment.RIGHT:
            return text.rjust(column.length)

        if column.align == Alignment.CENTER:
            # the odd space goes on the left
            halfway = (column.length - len(text)) // 2
            if doPadRight:
                text += " " * halfway
            return text.rjust(column.length)

        return text.ljust(column.length if doPadRight else 1)

    def _formatDividerLine(self, divider, columns):
        parts = []
        for column in columns:
            padding = 0
            if column.index > 0 and self.columnSeparator:
                if divider.useColumnSeparator:
                    parts.append(self.columnSeparator)
                else:
                    padding = len(self.columnSeparator)

            parts.append(divider.char * (column.length + padding))

        return "".join(parts)

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
Rendering configuration for tables, validated and read from (or written to) YAML.

A settings file holds everything about a table except its rows:

.. code:: yaml

    columnSeparator: " | "
    trimTrailingWhitespace: true
    alignments: lrc
    dividers:
      - index: 1
        char: "="
      - index: -1

``alignments`` is either positional text (one character per column, starting at
column 0) or a mapping from column index to alignment text. Every key is optional.
"""
import voluptuous as vol
from ruamel.yaml import YAML

from plaintable import runLog
from plaintable.alignment import parseAlignment
from plaintable.divider import Divider
from plaintable.plainTextTable import DEFAULT_COLUMN_SEPARATOR, PlainTextTable
from plaintable.utils.customExceptions import (
    InvalidTableSettingsError,
    NullArgumentError,
    UnsupportedAlignment,
)

CONF_ALIGNMENTS = "alignments"
CONF_COLUMN_SEPARATOR = "columnSeparator"
CONF_COLUMNS_EXPECTED = "columnsExpected"
CONF_DIVIDERS = "dividers"
CONF_TRIM_TRAILING_WHITESPACE = "trimTrailingWhitespace"

CONF_DIVIDER_CHAR = "char"
CONF_DIVIDER_INDEX = "index"
CONF_DIVIDER_USE_COLUMN_SEPARATOR = "useColumnSeparator"


def _alignment(value):
    try:
        return parseAlignment(value)
    except (UnsupportedAlignment, NullArgumentError) as ee:
        raise vol.Invalid(str(ee))


def _positionalAlignments(value):
    return {index: _alignment(char) for index, char in enumerate(value)}


_DIVIDER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_DIVIDER_INDEX): int,
        vol.Optional(CONF_DIVIDER_CHAR, default="-"): vol.All(
            str, vol.Length(min=1, max=1)
        ),
        vol.Optional(CONF_DIVIDER_USE_COLUMN_SEPARATOR, default=False): bool,
    }
)

TABLE_SETTINGS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_COLUMN_SEPARATOR, default=DEFAULT_COLUMN_SEPARATOR): str,
        vol.Optional(CONF_TRIM_TRAILING_WHITESPACE, default=False): bool,
        vol.Optional(CONF_COLUMNS_EXPECTED): vol.All(int, vol.Range(min=1)),
        vol.Optional(CONF_ALIGNMENTS, default={}): vol.Any(
            vol.All(str, _positionalAlignments),
            {vol.Coerce(int): vol.All(str, _alignment)},
        ),
        vol.Optional(CONF_DIVIDERS, default=[]): [_DIVIDER_SCHEMA],
    }
)


class TableSettings:
    """
    Everything needed to lay out a table, apart from its rows.

    Parameters
    ----------
    columnSeparator : str
        The string written between two cells.
    trimTrailingWhitespace : bool
        Whether to leave out the padding after the rightmost column.
    columnsExpected : int, optional
        The number of cells each row must have. Inferred from the first row if not given.
    alignments : dict, optional
        Mapping of column index to :py:class:`plaintable.alignment.Alignment`.
    dividers : list of Divider, optional
    """

    def __init__(
        self,
        columnSeparator=DEFAULT_COLUMN_SEPARATOR,
        trimTrailingWhitespace=False,
        columnsExpected=None,
        alignments=None,
        dividers=None,
    ):
        self.columnSeparator = columnSeparator
        self.trimTrailingWhitespace = trimTrailingWhitespace
        self.columnsExpected = columnsExpected
        self.alignments = dict(alignments or {})
        self.dividers = list(dividers or [])

    @classmethod
    def fromDict(cls, data, source="<dict>"):
        """Validate a plain dictionary (e.g. freshly loaded YAML) and build settings from it."""
        try:
            validated = TABLE_SETTINGS_SCHEMA(data if data is not None else {})
        except vol.Invalid as ee:
            runLog.error("Could not validate table settings from {}".format(source))
            raise InvalidTableSettingsError(source, ee) from ee

        return cls(
            columnSeparator=validated[CONF_COLUMN_SEPARATOR],
            trimTrailingWhitespace=validated[CONF_TRIM_TRAILING_WHITESPACE],
            columnsExpected=validated.get(CONF_COLUMNS_EXPECTED),
            alignments=validated[CONF_ALIGNMENTS],
            dividers=[
                Divider(
                    d[CONF_DIVIDER_INDEX],
                    d[CONF_DIVIDER_CHAR],
                    d[CONF_DIVIDER_USE_COLUMN_SEPARATOR],
                )
                for d in validated[CONF_DIVIDERS]
            ],
        )

    @classmethod
    def load(cls, stream):
        """Read settings from YAML text or an open YAML stream."""
        yaml = YAML(typ="safe")
        data = yaml.load(stream)
        return cls.fromDict(data, source=getattr(stream, "name", "<yaml>"))

    @classmethod
    def fromTable(cls, table):
        """Capture the configuration of an existing table."""
        return cls(
            columnSeparator=table.columnSeparator,
            trimTrailingWhitespace=table.trimTrailingWhitespace,
            columnsExpected=table.columnsExpected if table.columnsExpected > 0 else None,
            alignments=table.alignments,
            dividers=[
                Divider(d.index, d.char, d.useColumnSeparator) for d in table.dividers
            ],
        )

    def toDict(self):
        data = {
            CONF_COLUMN_SEPARATOR: self.columnSeparator,
            CONF_TRIM_TRAILING_WHITESPACE: self.trimTrailingWhitespace,
            CONF_ALIGNMENTS: {
                index: alignment.value
                for index, alignment in sorted(self.alignments.items())
            },
            CONF_DIVIDERS: [
                {
                    CONF_DIVIDER_INDEX: d.index,
                    CONF_DIVIDER_CHAR: d.char,
                    CONF_DIVIDER_USE_COLUMN_SEPARATOR: d.useColumnSeparator,
                }
                for d in self.dividers
            ],
        }
        if self.columnsExpected is not None:
            data[CONF_COLUMNS_EXPECTED] = self.columnsExpected

        return data

    def dump(self, stream):
        """Write these settings to ``stream`` as YAML."""
        yaml = YAML(typ="safe")
        yaml.default_flow_style = False
        yaml.dump(self.toDict(), stream)

    def applyTo(self, table):
        """
        Configure ``table`` with these settings and return it.

        Alignments are merged into the ones the table already has, while the
        dividers replace the table's dividers. ``columnsExpected`` is ignored here,
        since it can only be given when a table is created.
        """
        runLog.debug("Applying {} to table".format(self))
        table.separateBy(self.columnSeparator).trimTrailingSpace(
            self.trimTrailingWhitespace
        )
        for index, alignment in self.alignments.items():
            table.align(index, alignment)

        return table.setDividers(
            Divider(d.index, d.char, d.useColumnSeparator) for d in self.dividers
        )

    def newTable(self, rows=None):
        """Create a table configured with these settings, optionally importing ``rows``."""
        table = PlainTextTable(columnsExpected=self.columnsExpected)
        self.applyTo(table)
        if rows is not None:
            table.importRows(rows)

        return table

    def __repr__(self):
        return "<TableSettings separator={!r} trim={} columns={} alignments={} dividers={}>".format(
            self.columnSeparator,
            self.trimTrailingWhitespace,
            self.columnsExpected,
            len(self.alignments),
            len(self.dividers),
        )

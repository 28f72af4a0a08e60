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
plaintable lays out rows of text as aligned, fixed-width plain text.

The main entry point is :py:class:`plaintable.plainTextTable.PlainTextTable`::

    import sys

    from plaintable import PlainTextTable

    table = PlainTextTable().align(1, "r").addDivider(-1)
    table.importRows([["apples", "3"], ["pears", "12"]])
    table.render(sys.stdout)

Column widths are tracked as rows are added, alignment and dividers are applied
when the table is rendered, and reusable configuration can be kept in YAML through
:py:class:`plaintable.settings.TableSettings`.
"""
from plaintable.alignment import Alignment, parseAlignment
from plaintable.divider import Divider
from plaintable.meta import __version__
from plaintable.plainTextTable import DEFAULT_COLUMN_SEPARATOR, PlainTextTable
from plaintable.settings import TableSettings
from plaintable.utils.customExceptions import (
    ColumnCountMismatch,
    InvalidTableSettingsError,
    NullArgumentError,
    TabulationError,
    UnsupportedAlignment,
)

__all__ = [
    "Alignment",
    "ColumnCountMismatch",
    "DEFAULT_COLUMN_SEPARATOR",
    "Divider",
    "InvalidTableSettingsError",
    "NullArgumentError",
    "PlainTextTable",
    "TableSettings",
    "TabulationError",
    "UnsupportedAlignment",
    "__version__",
    "parseAlignment",
]

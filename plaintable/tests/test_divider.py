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

"""Tests of divider index resolution."""
import unittest

from plaintable.divider import Divider


class TestDivider(unittest.TestCase):
    def test_defaults(self):
        divider = Divider(2)
        self.assertEqual(divider.char, "-")
        self.assertFalse(divider.useColumnSeparator)

    def test_resolveIndex(self):
        self.assertEqual(Divider(0).resolveIndex(3), 0)
        self.assertEqual(Divider(3).resolveIndex(3), 3)
        self.assertEqual(Divider(-1).resolveIndex(3), 3)
        self.assertEqual(Divider(-2).resolveIndex(3), 2)
        self.assertEqual(Divider(-4).resolveIndex(3), 0)
        self.assertEqual(Divider(-1).resolveIndex(0), 0)

    def test_singleCharacter(self):
        for char in ["", "==", None]:
            with self.assertRaises(ValueError):
                Divider(0, char)

    def test_equality(self):
        self.assertEqual(Divider(1, "="), Divider(1, "="))
        self.assertNotEqual(Divider(1, "="), Divider(1, "=", True))
        self.assertNotEqual(Divider(1), "Divider")

    def test_hashable(self):
        dividers = {Divider(1, "="), Divider(1, "="), Divider(-1)}
        self.assertEqual(len(dividers), 2)
        self.assertEqual(hash(Divider(0, "~", 1)), hash(Divider(0, "~", True)))

    def test_useColumnSeparatorIsBool(self):
        self.assertIs(Divider(0, "-", 1).useColumnSeparator, True)
        self.assertIs(Divider(0, "-", "").useColumnSeparator, False)

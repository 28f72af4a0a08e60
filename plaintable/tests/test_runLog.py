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

"""Tests of the runLog tooling."""
import logging
import unittest
from io import StringIO

from plaintable import runLog
from plaintable.tests import mockRunLogs


class TestRunLog(unittest.TestCase):
    def setUp(self):
        self._originalLog = runLog.LOG
        runLog.LOG = runLog._RunLog()

    def tearDown(self):
        runLog.LOG = self._originalLog

    def _startStreamLog(self, name):
        stream = StringIO()
        runLog.LOG.startLog(name, stream=stream)
        return stream

    def test_setVerbosityFromInteger(self):
        log = runLog._RunLog()
        verbosityRank = log.getLogVerbosityRank("debug")
        runLog.setVerbosity(verbosityRank)
        self.assertEqual(verbosityRank, runLog.getVerbosity())
        self.assertEqual(verbosityRank, logging.DEBUG)

    def test_setVerbosityFromString(self):
        runLog.setVerbosity("error")
        self.assertEqual(runLog.getVerbosity(), logging.ERROR)
        self.assertEqual(runLog.LOG.logger.level, logging.ERROR)

    def test_verbosityOutOfRange(self):
        runLog.setVerbosity(-50)
        self.assertEqual(runLog.LOG.logger.level, logging.DEBUG)

        runLog.setVerbosity(5000)
        self.assertEqual(runLog.LOG.logger.level, logging.ERROR)

        # in between levels snap down to the closest one
        runLog.setVerbosity(logging.WARNING + 1)
        self.assertEqual(runLog.getVerbosity(), logging.WARNING)

    def test_invalidSetVerbosity(self):
        with self.assertRaises(KeyError):
            runLog.setVerbosity("taco")

        with self.assertRaises(TypeError):
            runLog.setVerbosity(["debug"])

    def test_startLog(self):
        stream = self._startStreamLog("test_startLog")
        runLog.setVerbosity(logging.INFO)

        runLog.debug("You shouldn't see this.")
        runLog.warning("Hello, ")
        runLog.error("world!")

        streamVal = stream.getvalue()
        self.assertNotIn("shouldn't", streamVal)
        self.assertIn("[warn] Hello", streamVal, msg=streamVal)
        self.assertIn("[err ] world!", streamVal, msg=streamVal)

    def test_multilineMessagesAreIndented(self):
        stream = self._startStreamLog("test_multiline")
        runLog.warning("first\nsecond")
        self.assertIn("[warn] first\n       second\n", stream.getvalue())

    def test_singleMessages(self):
        stream = self._startStreamLog("test_singleMessages")
        for ii in range(3):
            runLog.warning("only once", single=True)
            runLog.error("labelled {}".format(ii), single=True, label="labelled")
            runLog.warning("every time")

        streamVal = stream.getvalue()
        self.assertEqual(streamVal.count("only once"), 1)
        self.assertEqual(streamVal.count("labelled"), 1)
        self.assertIn("labelled 0", streamVal)
        self.assertEqual(streamVal.count("every time"), 3)

    def test_defaultLogWritesToStderr(self):
        with mockRunLogs.StandardStreamsLog() as streams:
            runLog.warning("to stderr")

        self.assertEqual(streams.stdout.getvalue(), "")
        self.assertEqual(streams.stderr.getvalue(), "[warn] to stderr\n")

    def test_nullLoggerKeepsOneHandler(self):
        logger = runLog.NullLogger("NULL")
        logger.addHandler(logging.StreamHandler(StringIO()))
        self.assertEqual(len(logger.handlers), 1)

    def test_bufferLog(self):
        with mockRunLogs.BufferLog() as mock:
            self.assertIs(runLog.LOG, mock)
            runLog.debug("a")
            runLog.warning("b", single=True)
            runLog.warning("b", single=True)
            runLog.error("c")

        self.assertIsNot(runLog.LOG, mock)
        self.assertEqual(mock.getMessages("warning"), ["b"])
        self.assertEqual(mock.getOutput(), "[dbug] a\n[warn] b\n[err ] c\n")

        mock.setVerbosity("warning")
        with mock:
            runLog.debug("hidden")
        self.assertEqual(mock.getMessages("debug"), ["a"])

"""Tests for the pyperclip clipboard adapter."""

import unittest
from unittest.mock import patch

import pyperclip

from clipstack.core.clipboard import ClipboardPort, PyperclipClipboard
from clipstack.core.exceptions import (ClipboardReadError, ClipboardWriteError,
                                       ClipstackError, PlatformError)


class TestPyperclipClipboard(unittest.TestCase):
    """Test suite for PyperclipClipboard"""

    def setUp(self):
        self.clipboard = PyperclipClipboard()

    def test_is_clipboard_port(self):
        self.assertIsInstance(self.clipboard, ClipboardPort)

    def test_port_is_abstract(self):
        with self.assertRaises(TypeError):
            ClipboardPort()

    @patch('pyperclip.paste', return_value="copied text")
    def test_read(self, mock_paste):
        self.assertEqual(self.clipboard.read(), "copied text")
        mock_paste.assert_called_once_with()

    @patch('pyperclip.paste', side_effect=pyperclip.PyperclipException("no mechanism"))
    def test_read_failure(self, mock_paste):
        """Test pyperclip errors become ClipboardReadError"""
        with self.assertRaises(ClipboardReadError) as ctx:
            self.clipboard.read()
        self.assertIsInstance(ctx.exception, PlatformError)
        self.assertIsInstance(ctx.exception.original_error, pyperclip.PyperclipException)
        self.assertIs(ctx.exception.__cause__, ctx.exception.original_error)

    @patch('pyperclip.paste', return_value=None)
    def test_read_non_text(self, mock_paste):
        with self.assertRaises(ClipboardReadError):
            self.clipboard.read()

    @patch('pyperclip.copy')
    def test_write(self, mock_copy):
        self.clipboard.write("hello")
        mock_copy.assert_called_once_with("hello")

    @patch('pyperclip.copy', side_effect=OSError("denied"))
    def test_write_failure(self, mock_copy):
        """Test write errors become ClipboardWriteError"""
        with self.assertRaises(ClipboardWriteError) as ctx:
            self.clipboard.write("hello")
        self.assertIn("Caused by: OSError: denied", str(ctx.exception))


class TestExceptions(unittest.TestCase):
    """Test exception hierarchy and formatting"""

    def test_hierarchy(self):
        self.assertTrue(issubclass(ClipboardReadError, PlatformError))
        self.assertTrue(issubclass(ClipboardWriteError, PlatformError))
        self.assertTrue(issubclass(PlatformError, ClipstackError))

    def test_str_without_cause(self):
        self.assertEqual(str(PlatformError("plain")), "plain")
        self.assertIsNone(PlatformError("plain").original_error)

    def test_str_with_cause(self):
        error = ClipboardReadError("Failed", original_error=ValueError("bad"))
        self.assertEqual(str(error), "Failed (Caused by: ValueError: bad)")


if __name__ == '__main__':
    unittest.main()

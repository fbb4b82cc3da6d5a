"""Tests for the history window commands and keyboard shortcuts.

The window is built around a mock root and ``setup_gui`` is not called, so
no display is needed.
"""

import unittest
from unittest.mock import MagicMock

from clipstack.core.config import MonitorConfig
from clipstack.gui.keyboard import KeyboardShortcuts

from tests.test_base import FakeClipboard

try:
    from clipstack.gui.window import ClipboardHistoryGUI
except ImportError:  # tkinter missing from this interpreter
    ClipboardHistoryGUI = None


@unittest.skipIf(ClipboardHistoryGUI is None, "tkinter is not available")
class TestClipboardHistoryGUI(unittest.TestCase):
    """Test window commands against the core components"""

    def setUp(self):
        self.root = MagicMock()
        self.scheduler = MagicMock()
        self.clipboard = FakeClipboard(content="before launch")
        self.app = ClipboardHistoryGUI(
            self.root,
            MonitorConfig(capacity=3, poll_interval=0.25),
            clipboard=self.clipboard,
            scheduler=self.scheduler,
        )

    def contents(self):
        return [entry.content for entry in self.app.store.iter()]

    def test_init(self):
        self.assertEqual(self.app.store.capacity, 3)
        self.assertEqual(self.app.monitor.poll_interval, 0.25)
        self.assertTrue(self.app.monitor.enabled)
        self.assertFalse(self.app.gui_ready)

    def test_start_primes_and_schedules(self):
        self.app.start()
        self.assertEqual(self.app.monitor.last_seen, "before launch")
        self.scheduler.schedule.assert_called_once_with(0.25, self.app.poll)

    def test_close_cancels_polling(self):
        self.app.start()
        handle = self.scheduler.schedule.return_value
        self.app.close()
        handle.cancel.assert_called_once_with()
        self.root.destroy.assert_called_once_with()

    def test_poll_and_refresh_capture(self):
        self.app.start()
        self.clipboard.content = "one"
        self.app.poll()
        self.clipboard.content = "two"
        self.app.refresh()
        self.assertEqual(self.contents(), ["two", "one"])

    def test_clear_history(self):
        self.clipboard.content = "one"
        self.app.refresh()
        self.app.clear_history()
        self.app.clear_history()
        self.assertEqual(len(self.app.store), 0)

    def test_toggle_monitor(self):
        self.app.toggle_monitor()
        self.assertFalse(self.app.monitor.enabled)
        self.clipboard.content = "ignored"
        self.app.refresh()
        self.assertEqual(len(self.app.store), 0)

        self.app.toggle_monitor()
        self.assertTrue(self.app.monitor.enabled)

    def test_search_keeps_ranks(self):
        for text in ("HELLO again", "goodbye", "Hello World"):
            self.clipboard.content = text
            self.app.refresh()

        self.app.set_search("hello")
        self.assertEqual([rank for rank, _ in self.app.visible_entries()], [0, 2])

        self.app.clear_search()
        self.assertEqual(self.app.search_filter, "")
        self.assertEqual(len(self.app.visible_entries()), 3)

    def test_copy_entry_success(self):
        self.clipboard.content = "one"
        self.app.refresh()
        self.assertTrue(self.app.copy_entry("one"))
        self.assertEqual(self.clipboard.writes, ["one"])

    def test_copy_entry_failure_is_reported(self):
        """Test a failed copy is reported, not raised"""
        self.clipboard.write_error = OSError("denied")
        with self.assertLogs("clipstack.gui.window", level="INFO") as logs:
            self.assertFalse(self.app.copy_entry("text"))
        self.assertTrue(any("Failed to set clipboard" in line for line in logs.output))

    def test_copy_selected_without_selection(self):
        self.app.copy_selected()
        self.assertEqual(self.clipboard.writes, [])


@unittest.skipIf(ClipboardHistoryGUI is None, "tkinter is not available")
class TestRender(unittest.TestCase):
    """Test redraws against mock widgets"""

    def setUp(self):
        self.clipboard = FakeClipboard()
        self.app = ClipboardHistoryGUI(
            MagicMock(), MonitorConfig(), clipboard=self.clipboard, scheduler=MagicMock()
        )
        for text in ("A", "B", "C"):
            self.clipboard.content = text
            self.app.refresh()

        for name in ("history_listbox", "count_label", "empty_label",
                     "preview_text", "stats_label", "status_label", "output_text"):
            setattr(self.app, name, MagicMock())
        self.listbox = self.app.history_listbox
        self.listbox.yview.return_value = (0.4, 0.9)
        self.listbox.curselection.return_value = ()
        self.app.gui_ready = True
        self.app.render()

    def test_render_keeps_scroll_position(self):
        """Test the list view stays where the user scrolled it"""
        self.listbox.reset_mock()
        self.app.render()

        self.listbox.delete.assert_called_once()
        self.assertEqual(self.listbox.insert.call_count, 3)
        self.listbox.yview_moveto.assert_called_once_with(0.4)
        self.listbox.see.assert_not_called()

    def test_render_keeps_selection_without_scrolling(self):
        self.listbox.curselection.return_value = (1,)
        self.listbox.reset_mock()
        self.app.render()

        self.listbox.selection_set.assert_called_once_with(1)
        self.listbox.see.assert_not_called()

    def test_render_follows_moved_selection(self):
        """Test the view scrolls only when the selected entry changed row"""
        self.listbox.curselection.return_value = (2,)
        self.clipboard.content = "D"
        self.app.monitor.tick()
        self.listbox.reset_mock()
        self.app.render()

        self.listbox.selection_set.assert_called_once_with(3)
        self.listbox.see.assert_called_once_with(3)

    def test_preview_rebuilt_only_on_selection_change(self):
        self.listbox.curselection.return_value = (0,)
        self.app.render()
        self.app.preview_text.insert.assert_called_once_with("1.0", "C")
        self.app.stats_label.configure.assert_called_with(text="📏 1 chars  📄 1 lines")

        self.app.preview_text.reset_mock()
        self.app.render()
        self.app.preview_text.insert.assert_not_called()

        self.listbox.curselection.return_value = (1,)
        self.app.on_select()
        self.app.preview_text.insert.assert_called_once_with("1.0", "B")

    def test_count_and_empty_message(self):
        self.app.count_label.configure.assert_called_with(text="📊 3 items")
        self.app.empty_label.configure.assert_called_with(text="")

        self.app.set_search("missing")
        self.app.empty_label.configure.assert_called_with(text="🔍 No matches found for your search.")


class TestKeyboardShortcuts(unittest.TestCase):
    """Test keyboard shortcut bindings"""

    def setUp(self):
        self.parent = MagicMock()
        self.shortcuts = KeyboardShortcuts(self.parent)

    def test_bindings(self):
        expected = {
            '<Control-r>': 'refresh',
            '<Control-l>': 'clear_history',
            '<Control-p>': 'toggle_monitor',
            '<Return>': 'copy_selected',
            '<Escape>': 'clear_search',
        }
        bound = {call[0][0]: call[0][1] for call in self.parent.root.bind.call_args_list}
        self.assertEqual(set(bound), set(expected))

        for key, method_name in expected.items():
            bound[key](None)
            getattr(self.parent, method_name).assert_called_once_with()


if __name__ == '__main__':
    unittest.main()

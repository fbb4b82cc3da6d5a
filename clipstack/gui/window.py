"""Tkinter window for browsing and reactivating clipboard history."""

import logging
import tkinter as tk
from datetime import datetime
from tkinter import scrolledtext, ttk
from typing import List, Optional, Tuple

from ..core.clipboard import ClipboardPort, PyperclipClipboard
from ..core.config import MonitorConfig
from ..core.exceptions import PlatformError
from ..core.history import Entry, HistoryStore
from ..core.monitor import Monitor
from ..core.query import query
from ..core.scheduler import ScheduledTask, Scheduler, TkScheduler
from .formatting import content_stats, empty_message, format_row, preview, rank_label
from .keyboard import KeyboardShortcuts

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "• Copy text normally (Ctrl+C) - it will appear here automatically",
    "• Select an item and press 'Copy' (or Enter) to copy it back to the clipboard",
    "• Use search to filter through your clipboard history",
    "• Toggle 'Auto Monitor' to pause/resume clipboard monitoring",
)


class ClipboardHistoryGUI:
    """Main window of the clipboard history manager.

    Widgets are only created by ``setup_gui``; until then the command
    methods still drive the store and monitor, which keeps them usable
    from tests without a display.
    """

    def __init__(self, root, config: Optional[MonitorConfig] = None,
                 clipboard: Optional[ClipboardPort] = None,
                 scheduler: Optional[Scheduler] = None):
        """Initialize the ClipboardHistoryGUI."""
        self.root = root
        self.config = config or MonitorConfig()

        # Initialize core components
        self.store = HistoryStore(self.config.capacity)
        self.clipboard = clipboard or PyperclipClipboard()
        self.monitor = Monitor(
            self.store,
            self.clipboard,
            poll_interval=self.config.poll_interval,
            enabled=self.config.start_enabled,
        )
        self.scheduler = scheduler or TkScheduler(root)
        self.poll_task: Optional[ScheduledTask] = None

        # Initialize view state
        self.search_filter = ""
        self.visible: List[Tuple[int, Entry]] = []
        self.preview_content: Optional[str] = None
        self.gui_ready = False

    def setup_gui(self):
        """Setup GUI components and layout"""
        self.root.title("📋 Clipboard Manager")

        self.main_frame = ttk.Frame(self.root, padding="10")
        self.main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        # Controls frame
        self.control_frame = ttk.LabelFrame(self.main_frame, text="Controls", padding="5")
        self.control_frame.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=5)

        self.auto_monitor_var = tk.BooleanVar(value=self.monitor.enabled)
        self.auto_monitor_check = ttk.Checkbutton(
            self.control_frame,
            text="Auto Monitor",
            variable=self.auto_monitor_var,
            command=self.on_auto_monitor_toggled,
        )
        self.auto_monitor_check.grid(row=0, column=0, pady=5, padx=5)

        self.refresh_button = ttk.Button(
            self.control_frame, text="🔄 Refresh", command=self.refresh
        )
        self.refresh_button.grid(row=0, column=1, pady=5, padx=5)

        self.clear_button = ttk.Button(
            self.control_frame, text="🗑️ Clear All", command=self.clear_history
        )
        self.clear_button.grid(row=0, column=2, pady=5, padx=5)

        self.count_label = ttk.Label(self.control_frame, text="📊 0 items")
        self.count_label.grid(row=0, column=3, pady=5, padx=5, sticky="e")

        # Search frame
        self.search_frame = ttk.Frame(self.main_frame)
        self.search_frame.grid(row=1, column=0, sticky=(tk.W, tk.E), pady=5)

        ttk.Label(self.search_frame, text="🔍 Search:").grid(row=0, column=0, padx=5)
        self.search_var = tk.StringVar(value=self.search_filter)
        self.search_var.trace_add("write", lambda *_: self.set_search(self.search_var.get()))
        self.search_entry = ttk.Entry(self.search_frame, textvariable=self.search_var)
        self.search_entry.grid(row=0, column=1, sticky=(tk.W, tk.E), padx=5)
        self.search_clear_button = ttk.Button(
            self.search_frame, text="✖", width=3, command=self.clear_search
        )
        self.search_clear_button.grid(row=0, column=2, padx=5)

        # Instructions frame
        self.instructions_frame = ttk.LabelFrame(
            self.main_frame, text="ℹ️ Instructions", padding="5"
        )
        self.instructions_frame.grid(row=2, column=0, sticky=(tk.W, tk.E), pady=5)
        for row, line in enumerate(INSTRUCTIONS):
            ttk.Label(self.instructions_frame, text=line).grid(row=row, column=0, sticky="w")

        # History frame
        self.history_frame = ttk.LabelFrame(self.main_frame, text="History", padding="5")
        self.history_frame.grid(row=3, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), pady=5)

        self.history_listbox = tk.Listbox(self.history_frame, height=12, activestyle="none")
        self.history_listbox.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        self.history_listbox.bind("<<ListboxSelect>>", lambda e: self.on_select())
        self.history_listbox.bind("<Double-Button-1>", lambda e: self.copy_selected())

        self.history_scrollbar = ttk.Scrollbar(
            self.history_frame, orient=tk.VERTICAL, command=self.history_listbox.yview
        )
        self.history_scrollbar.grid(row=0, column=1, sticky=(tk.N, tk.S))
        self.history_listbox.configure(yscrollcommand=self.history_scrollbar.set)

        self.empty_label = ttk.Label(self.history_frame, text="")
        self.empty_label.grid(row=1, column=0, columnspan=2, pady=5)

        # Preview frame
        self.preview_frame = ttk.LabelFrame(self.main_frame, text="Preview", padding="5")
        self.preview_frame.grid(row=4, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), pady=5)

        self.preview_text = scrolledtext.ScrolledText(self.preview_frame, height=6, wrap=tk.WORD)
        self.preview_text.grid(row=0, column=0, columnspan=2, sticky=(tk.W, tk.E, tk.N, tk.S))
        self.preview_text.configure(state=tk.DISABLED)

        self.stats_label = ttk.Label(self.preview_frame, text="")
        self.stats_label.grid(row=1, column=0, sticky="w", pady=5)

        self.copy_button = ttk.Button(
            self.preview_frame, text="📋 Copy", command=self.copy_selected
        )
        self.copy_button.grid(row=1, column=1, sticky="e", pady=5, padx=5)

        # Log frame
        self.log_frame = ttk.LabelFrame(self.main_frame, text="Log", padding="5")
        self.log_frame.grid(row=5, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), pady=5)

        self.output_text = scrolledtext.ScrolledText(self.log_frame, height=4)
        self.output_text.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        self.status_label = ttk.Label(self.main_frame, text="")
        self.status_label.grid(row=6, column=0, sticky="w")

        # Configure grid weights
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        self.main_frame.columnconfigure(0, weight=1)
        self.main_frame.rowconfigure(3, weight=3)  # History takes most of the space
        self.main_frame.rowconfigure(4, weight=1)
        self.search_frame.columnconfigure(1, weight=1)
        self.control_frame.columnconfigure(3, weight=1)
        self.history_frame.columnconfigure(0, weight=1)
        self.history_frame.rowconfigure(0, weight=1)
        self.preview_frame.columnconfigure(0, weight=1)
        self.preview_frame.rowconfigure(0, weight=1)
        self.log_frame.columnconfigure(0, weight=1)

        self.keyboard_shortcuts = KeyboardShortcuts(self)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.gui_ready = True
        self.render()

    def start(self):
        """Prime the monitor and start polling"""
        self.monitor.prime()
        self.stop()
        self.poll_task = self.scheduler.schedule(self.config.poll_interval, self.poll)
        self.log_message(f"▶️ Monitoring clipboard every {self.config.poll_interval_ms} ms")

    def stop(self):
        if self.poll_task is not None:
            self.poll_task.cancel()
            self.poll_task = None

    def close(self):
        """Stop polling and destroy the window"""
        self.stop()
        self.root.destroy()

    def poll(self):
        """Scheduled tick; redraws every time so ages stay current"""
        self.monitor.tick()
        self.render()

    def log_message(self, message: str):
        """Log message to the log panel and the module logger"""
        logger.info(message)
        if self.gui_ready:
            self.output_text.insert(tk.END, f"{datetime.now():%H:%M:%S} {message}\n")
            self.output_text.see(tk.END)

    def set_status(self, message: str):
        if self.gui_ready:
            self.status_label.configure(text=message)

    def refresh(self):
        """Poll the clipboard now"""
        if self.monitor.tick():
            self.log_message("🔄 New clipboard content captured")
        self.render()

    def clear_history(self):
        """Remove all history entries"""
        self.store.clear()
        self.log_message("🗑️ Cleared clipboard history")
        self.render()

    def toggle_monitor(self):
        self.set_monitoring(not self.monitor.enabled)

    def on_auto_monitor_toggled(self):
        self.set_monitoring(self.auto_monitor_var.get())

    def set_monitoring(self, enabled: bool):
        self.monitor.set_enabled(enabled)
        if self.gui_ready and self.auto_monitor_var.get() != enabled:
            self.auto_monitor_var.set(enabled)
        self.log_message("▶️ Monitoring resumed" if enabled else "⏸️ Monitoring paused")

    def set_search(self, text: str):
        if text == self.search_filter:
            return
        self.search_filter = text
        self.render()

    def clear_search(self):
        if self.gui_ready:
            self.search_var.set("")  # trace calls set_search
        self.set_search("")

    def visible_entries(self) -> List[Tuple[int, Entry]]:
        return query(self.store.snapshot(), self.search_filter)

    def selected_index(self) -> Optional[int]:
        """Listbox row currently selected, if any"""
        if not self.gui_ready:
            return None
        selection = self.history_listbox.curselection()
        if not selection or selection[0] >= len(self.visible):
            return None
        return selection[0]

    def selected(self) -> Optional[Tuple[int, Entry]]:
        """Ranked entry selected in the list, if any"""
        index = self.selected_index()
        return None if index is None else self.visible[index]

    def copy_selected(self):
        """Copy the selected entry back to the clipboard"""
        selected = self.selected()
        if selected is None:
            self.set_status("Select an entry to copy")
            return
        rank, entry = selected
        if self.copy_entry(entry.content):
            self.set_status(f"📋 Copied {rank_label(rank)} to clipboard")

    def copy_entry(self, content: str) -> bool:
        """Copy content to the clipboard.

        Returns:
            bool: True on success. Failures are reported in the log and status bar.
        """
        try:
            self.monitor.copy_back(content)
        except PlatformError as e:
            self.log_message(f"❌ Failed to set clipboard: {e}")
            self.set_status("❌ Copy failed, see log")
            return False
        self.log_message(f"📋 Copied {len(content)} chars to clipboard")
        return True

    def render(self):
        """Redraw count, list and preview from the current store"""
        if not self.gui_ready:
            return

        previous = self.selected()
        previous_index = self.selected_index()
        first, _ = self.history_listbox.yview()
        self.visible = self.visible_entries()
        self.count_label.configure(text=f"📊 {len(self.store)} items")

        now = datetime.now()
        self.history_listbox.delete(0, tk.END)
        for rank, entry in self.visible:
            self.history_listbox.insert(tk.END, format_row(rank, entry, now))
        self.history_listbox.yview_moveto(first)

        self.empty_label.configure(text="" if self.visible else empty_message(self.search_filter))

        if previous is not None:
            for index, (_, entry) in enumerate(self.visible):
                if entry.content == previous[1].content:
                    self.history_listbox.selection_set(index)
                    if index != previous_index:
                        self.history_listbox.see(index)
                    break
        self.on_select()

    def on_select(self):
        """Show the selected entry in the preview pane"""
        selected = self.selected()
        content = selected[1].content if selected else None
        if content == self.preview_content:
            return
        self.preview_content = content

        self.preview_text.configure(state=tk.NORMAL)
        self.preview_text.delete("1.0", tk.END)
        self.preview_text.insert("1.0", preview(content) if content is not None else "")
        self.preview_text.configure(state=tk.DISABLED)

        if content is not None:
            chars, lines = content_stats(content)
            self.stats_label.configure(text=f"📏 {chars} chars  📄 {lines} lines")
        else:
            self.stats_label.configure(text="")

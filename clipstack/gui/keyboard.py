"""Keyboard shortcut handling."""


class KeyboardShortcuts:
    """Manages keyboard shortcuts"""

    def __init__(self, parent):
        self.parent = parent
        self.shortcuts = {}
        self.setup_shortcuts()

    def setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        self.shortcuts = {
            "<Control-r>": self.parent.refresh,
            "<Control-l>": self.parent.clear_history,
            "<Control-p>": self.parent.toggle_monitor,
            "<Return>": self.parent.copy_selected,
            "<Escape>": self.parent.clear_search,
        }

        for key, func in self.shortcuts.items():
            self.parent.root.bind(key, lambda e, f=func: f())

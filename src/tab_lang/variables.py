# Registers used by the def/use/inc/[set] commands
from .errors import ResolutionError

REGISTER_COUNT = 10


class VariableStore:
    def __init__(self):
        self.values = [''] * REGISTER_COUNT  # _0 .. _9
        self.selection = None                # Captured by [set], restored by [_]

    def get(self, slot):
        return self.values[slot]

    def store(self, slot, value):
        self.values[slot] = value

    def capture(self, selection):
        self.selection = selection

    def restore(self):
        if self.selection is None:
            raise ResolutionError("No selection stored with [set] to restore with [_]")
        return self.selection

# Node classes produced by the parser
# Selections describe table coordinates, commands describe what to do with them
from enum import Enum

# Marker for the open second corner of a box selection ([1,1,-,-])
OPEN = None


class Node:
    pass


class Selection(Node):
    # Concrete selections can be dispatched directly, dynamic ones must be resolved first
    dynamic = False


class Cell(Selection):
    def __init__(self, row, col):
        self.row = row  # 0-based row index
        self.col = col  # 0-based column index

    def __repr__(self):
        return f"Cell({self.row + 1},{self.col + 1})"


class Row(Selection):
    def __init__(self, row):
        self.row = row

    def __repr__(self):
        return f"Row({self.row + 1})"


class Col(Selection):
    def __init__(self, col):
        self.col = col

    def __repr__(self):
        return f"Col({self.col + 1})"


class Box(Selection):
    def __init__(self, row1, col1, row2, col2):
        self.row1 = row1
        self.col1 = col1
        self.row2 = row2  # OPEN means the table's last row
        self.col2 = col2  # OPEN means the table's last column

    def __repr__(self):
        def fmt(value):
            return '-' if value is OPEN else str(value + 1)
        return f"Box({self.row1 + 1},{self.col1 + 1},{fmt(self.row2)},{fmt(self.col2)})"


class WholeTable(Selection):
    def __repr__(self):
        return "Table"


class Min(Selection):
    dynamic = True

    def __init__(self, ref):
        self.ref = ref  # Selection declared right before this one

    def __repr__(self):
        return f"Min({self.ref!r})"


class Max(Selection):
    dynamic = True

    def __init__(self, ref):
        self.ref = ref

    def __repr__(self):
        return f"Max({self.ref!r})"


class Substring(Selection):
    dynamic = True

    def __init__(self, pattern, ref):
        self.pattern = pattern  # Raw (still escaped) pattern text
        self.ref = ref

    def __repr__(self):
        return f"Substring({self.pattern!r}, {self.ref!r})"


class RestoredVariable(Selection):
    dynamic = True

    def __repr__(self):
        return "RestoredVariable"


class ModificationKind(Enum):
    IROW = 'irow'
    AROW = 'arow'
    DROW = 'drow'
    ICOL = 'icol'
    ACOL = 'acol'
    DCOL = 'dcol'


class DataKind(Enum):
    SET = 'set'
    CLEAR = 'clear'
    SWAP = 'swap'
    SUM = 'sum'
    AVG = 'avg'
    COUNT = 'count'
    LEN = 'len'


class VariableKind(Enum):
    DEFINE = 'def'
    USE = 'use'
    INCREMENT = 'inc'
    CAPTURE = '[set]'


class Command(Node):
    def __init__(self, kind, selection):
        self.kind = kind
        self.selection = selection  # Most recently declared selection at parse time

    def target(self):
        """Returns the explicit (row, col) target of the command, or None."""
        return None


class StructuralModification(Command):
    def __repr__(self):
        return f"{self.kind.value} on {self.selection!r}"


class DataOperation(Command):
    def __init__(self, kind, selection, target_row=None, target_col=None, text=None):
        super().__init__(kind, selection)
        self.target_row = target_row  # 0-based, only for swap/sum/avg/count/len
        self.target_col = target_col
        self.text = text              # Raw argument of set

    def target(self):
        if self.target_row is None:
            return None
        return self.target_row, self.target_col

    def __repr__(self):
        if self.kind is DataKind.SET:
            return f"set {self.text} on {self.selection!r}"
        if self.target_row is not None:
            return f"{self.kind.value} [{self.target_row + 1},{self.target_col + 1}] on {self.selection!r}"
        return f"{self.kind.value} on {self.selection!r}"


class VariableOperation(Command):
    def __init__(self, kind, selection, slot=None):
        super().__init__(kind, selection)
        self.slot = slot  # Register index 0-9, None for [set]

    def __repr__(self):
        if self.slot is None:
            return f"{self.kind.value} on {self.selection!r}"
        return f"{self.kind.value} _{self.slot} on {self.selection!r}"


# The parsed script: declared selections and the commands bound to them
class Call(Node):
    def __init__(self):
        # Commands appearing before any selection act on the first cell
        self.selections = [Cell(0, 0)]
        self.commands = []

    def current_selection(self):
        return self.selections[-1]

    def add_selection(self, selection):
        self.selections.append(selection)

    def add_command(self, command):
        self.commands.append(command)

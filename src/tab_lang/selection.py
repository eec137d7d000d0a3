"""
Selection resolution for tablang.

Concrete selections (Cell, Row, Col, Box, WholeTable) map directly onto table
coordinates. Dynamic ones (Min, Max, Substring, RestoredVariable) depend on the
table content at the moment a command runs and are rewritten into a concrete
selection right before dispatch.
"""
import pyarrow.compute as pc
from .errors import ResolutionError
from .ast import OPEN, Cell, Row, Col, Box, WholeTable, Min, Max, Substring, RestoredVariable
from .operations import unescape


def bounds(selection, table):
    """Returns the inclusive 0-based rectangle (row1, col1, row2, col2) covered by a selection."""
    if isinstance(selection, Cell):
        return selection.row, selection.col, selection.row, selection.col
    if isinstance(selection, Row):
        return selection.row, 0, selection.row, table.last_col()
    if isinstance(selection, Col):
        return 0, selection.col, table.last_row(), selection.col
    if isinstance(selection, Box):
        row2 = table.last_row() if selection.row2 is OPEN else selection.row2
        col2 = table.last_col() if selection.col2 is OPEN else selection.col2
        return selection.row1, selection.col1, row2, col2
    if isinstance(selection, WholeTable):
        return 0, 0, table.last_row(), table.last_col()
    raise TypeError(f"Selection {selection!r} must be resolved before use")


def coordinates(selection, table):
    """Lists the (row, col) pairs covered by a selection in row-major order.

    Coordinates outside the current table are left out, which only matters
    for dynamic selections scanned before the table is expanded.
    """
    row1, col1, row2, col2 = bounds(selection, table)
    row2 = min(row2, table.last_row())
    col2 = min(col2, table.last_col())
    return [(row, col)
            for row in range(row1, row2 + 1)
            for col in range(col1, col2 + 1)]


def is_subsequence(pattern, text):
    """Checks that the characters of pattern appear in text in the same order."""
    remaining = iter(text)
    return all(char in remaining for char in pattern)


class SelectionResolver:
    def __init__(self, table, variables, delimiters=' '):
        self.table = table
        self.variables = variables
        self.delimiters = delimiters

    def resolve(self, selection):
        """Rewrites a dynamic selection into a concrete one using the current table."""
        if not selection.dynamic:
            return selection
        if isinstance(selection, RestoredVariable):
            return self.resolve(self.variables.restore())
        if isinstance(selection, (Min, Max)):
            return self._extreme(selection)
        if isinstance(selection, Substring):
            return self._find(selection)
        raise TypeError(f"Unknown selection type: {type(selection).__name__}")

    def _extreme(self, selection):
        coords = coordinates(self.resolve(selection.ref), self.table)
        values = self.table.numeric_values(coords)
        if values.null_count == len(values):
            raise ResolutionError(f"No match for selection {selection!r}")
        key = 'min' if isinstance(selection, Min) else 'max'
        extreme = pc.min_max(values)[key]
        # pc.index returns the first occurrence, so ties keep the earliest cell
        index = pc.index(values, extreme).as_py()
        return Cell(*coords[index])

    def _find(self, selection):
        pattern = unescape(selection.pattern, self.delimiters)
        match = None
        for row, col in coordinates(self.resolve(selection.ref), self.table):
            if is_subsequence(pattern, self.table.get(row, col)):
                match = Cell(row, col)
        if match is None:
            raise ResolutionError(f"No match for selection {selection!r}")
        return match

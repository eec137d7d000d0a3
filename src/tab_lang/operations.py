import math
import pyarrow.compute as pc
from .ast import Cell, Row, Col, Box, WholeTable, OPEN, DataKind


def unescape(text, delimiters=' '):
    """Removes quoting and backslash escapes from a script argument.

    A backslash keeps the next character literally and double quotes only
    toggle quoting. An unquoted, unescaped delimiter or a newline ends the
    text.
    """
    result = []
    quoted = False
    escaped = False
    for char in text:
        if char == '\\' and not escaped:
            escaped = True
            continue
        if char == '"' and not escaped:
            quoted = not quoted
            continue
        if not quoted and (char == '\n' or (char in delimiters and not escaped)):
            break
        result.append(char)
        escaped = False
    return ''.join(result)


def format_number(value):
    """Formats a float as the shortest text that reads back to the same value."""
    if value is None or math.isnan(value):
        return 'nan'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def representative_cell(selection, table):
    """Returns the single cell whose length `len` reports for a selection."""
    if isinstance(selection, Cell):
        return selection.row, selection.col
    if isinstance(selection, Row):
        return selection.row, table.last_col()
    if isinstance(selection, Col):
        return table.last_row(), selection.col
    if isinstance(selection, Box):
        row = table.last_row() if selection.row2 is OPEN else selection.row2
        col = table.last_col() if selection.col2 is OPEN else selection.col2
        return row, col
    if isinstance(selection, WholeTable):
        return table.last_row(), table.last_col()
    raise TypeError(f"Selection {selection!r} must be resolved before use")


# DataOperations implements set, clear, swap, sum, avg, count and len
# Every handler receives the command and the covered coordinates in row-major order
class DataOperations:
    def __init__(self, table, delimiters=' '):
        self.table = table
        self.delimiters = delimiters
        self.handlers = {
            DataKind.SET: self.set,
            DataKind.CLEAR: self.clear,
            DataKind.SWAP: self.swap,
            DataKind.SUM: self.sum,
            DataKind.AVG: self.avg,
            DataKind.COUNT: self.count,
            DataKind.LEN: self.len,
        }

    def apply(self, command, selection, coords):
        handler = self.handlers.get(command.kind)
        if handler is None:
            raise ValueError(f"Unknown data command: {command.kind}")
        handler(command, selection, coords)

    def fill(self, coords, value):
        for row, col in coords:
            self.table.set(row, col, value)

    def set(self, command, selection, coords):
        self.fill(coords, unescape(command.text, self.delimiters))

    def clear(self, command, selection, coords):
        self.fill(coords, '')

    def swap(self, command, selection, coords):
        # Each covered cell is exchanged with the target in turn
        for coord in coords:
            self.table.swap_cells(coord, command.target())

    def sum(self, command, selection, coords):
        values = self.table.numeric_values(coords)
        total = pc.sum(values, min_count=0).as_py()
        self._store(command, format_number(total))

    def avg(self, command, selection, coords):
        values = self.table.numeric_values(coords)
        mean = pc.mean(values).as_py()
        self._store(command, format_number(mean))

    def count(self, command, selection, coords):
        non_empty = sum(1 for row, col in coords if self.table.get(row, col))
        self._store(command, str(non_empty))

    def len(self, command, selection, coords):
        row, col = representative_cell(selection, self.table)
        self._store(command, str(len(self.table.get(row, col))))

    def _store(self, command, text):
        row, col = command.target()
        self.table.set(row, col, text)

import re
from .errors import AllocationError, ResolutionError
from .ast import (
    OPEN, Cell, Row, Col, Box, WholeTable,
    ModificationKind, VariableKind,
    StructuralModification, DataOperation, VariableOperation
)
from .selection import SelectionResolver, coordinates
from .operations import DataOperations
from .variables import VariableStore

LEADING_INT_RE = re.compile(r'\s*[+-]?\d+')


def required_extent(selection, target=None):
    """Returns the (rows, cols) a table needs to hold a selection and an optional target."""
    rows = cols = 0
    if isinstance(selection, Cell):
        rows, cols = selection.row + 1, selection.col + 1
    elif isinstance(selection, Row):
        rows = selection.row + 1
    elif isinstance(selection, Col):
        cols = selection.col + 1
    elif isinstance(selection, Box):
        rows = max(selection.row1, -1 if selection.row2 is OPEN else selection.row2) + 1
        cols = max(selection.col1, -1 if selection.col2 is OPEN else selection.col2) + 1
    if target is not None:
        rows = max(rows, target[0] + 1)
        cols = max(cols, target[1] + 1)
    return rows, cols


def increment_text(text):
    """Adds one to the integer at the start of text; text without one counts as 0."""
    match = LEADING_INT_RE.match(text)
    value = int(match.group()) if match else 0
    return str(value + 1)


class Interpreter:
    def __init__(self, table, delimiters=' ', debug=False):
        self.table = table
        self.delimiters = delimiters
        self.debug = debug
        self.variables = VariableStore()
        self.resolver = SelectionResolver(table, self.variables, delimiters)
        self.data = DataOperations(table, delimiters)
        self.modifications = {
            ModificationKind.IROW: self._irow,
            ModificationKind.AROW: self._arow,
            ModificationKind.DROW: self._drow,
            ModificationKind.ICOL: self._icol,
            ModificationKind.ACOL: self._acol,
            ModificationKind.DCOL: self._dcol,
        }
        self.variable_handlers = {
            VariableKind.DEFINE: self._define,
            VariableKind.USE: self._use,
            VariableKind.INCREMENT: self._increment,
            VariableKind.CAPTURE: self._capture,
        }

    def interpret(self, call):
        """Executes the commands of a parsed call in script order.

        Args:
            call (Call): The parsed script

        Returns:
            Table: The mutated and trimmed table
        """
        for command in call.commands:
            try:
                self.execute(command)
            except MemoryError as e:
                raise AllocationError("Allocation failed, the table is too large") from e
        self.table.trim()
        return self.table

    def execute(self, command):
        # inc never touches its selection, so it is neither resolved nor allowed to grow the table
        uses_selection = not (isinstance(command, VariableOperation)
                              and command.kind is VariableKind.INCREMENT)
        selection = self.resolver.resolve(command.selection) if uses_selection else command.selection
        if self.debug:
            print(f"{command!r} -> {selection!r}")
        if uses_selection:
            self.table.expand(*required_extent(selection, command.target()))

        if isinstance(command, StructuralModification):
            self.modifications[command.kind](selection)
        elif isinstance(command, DataOperation):
            self.data.apply(command, selection, coordinates(selection, self.table))
        elif isinstance(command, VariableOperation):
            self.variable_handlers[command.kind](command, selection)
        else:
            raise TypeError(f"Unknown command type: {type(command).__name__}")

    # Structural modifications
    def _span(self, selection, rows):
        """Returns the first and last index of a box along the row or column axis."""
        if rows:
            last = self.table.last_row() if selection.row2 is OPEN else selection.row2
            return selection.row1, last
        last = self.table.last_col() if selection.col2 is OPEN else selection.col2
        return selection.col1, last

    def _insert_rows(self, selection, insert):
        if isinstance(selection, (Cell, Row)):
            insert(selection.row)
        elif isinstance(selection, (Col, WholeTable)):
            # Every other index is a freshly inserted row
            i = 0
            while i < self.table.height:
                insert(i)
                i += 2
        elif isinstance(selection, Box):
            start, end = self._span(selection, rows=True)
            for i in range(start, start + 2 * (end - start) + 1, 2):
                insert(i)

    def _insert_cols(self, selection, insert):
        if isinstance(selection, (Cell, Col)):
            insert(selection.col)
        elif isinstance(selection, (Row, WholeTable)):
            i = 0
            while i < self.table.width:
                insert(i)
                i += 2
        elif isinstance(selection, Box):
            start, end = self._span(selection, rows=False)
            for i in range(start, start + 2 * (end - start) + 1, 2):
                insert(i)

    def _irow(self, selection):
        self._insert_rows(selection, self.table.insert_row_before)

    def _arow(self, selection):
        self._insert_rows(selection, self.table.insert_row_after)

    def _drow(self, selection):
        if isinstance(selection, (Cell, Row)):
            self.table.delete_row(selection.row)
        elif isinstance(selection, (Col, WholeTable)):
            self.table.clear()
        elif isinstance(selection, Box):
            start, end = self._span(selection, rows=True)
            for _ in range(end - start + 1):
                self.table.delete_row(start)

    def _icol(self, selection):
        self._insert_cols(selection, self.table.insert_col_before)

    def _acol(self, selection):
        self._insert_cols(selection, self.table.insert_col_after)

    def _dcol(self, selection):
        if isinstance(selection, (Cell, Col)):
            self.table.delete_col(selection.col)
        elif isinstance(selection, (Row, WholeTable)):
            self.table.clear()
        elif isinstance(selection, Box):
            start, end = self._span(selection, rows=False)
            for _ in range(end - start + 1):
                self.table.delete_col(start)

    # Variable commands
    def _define(self, command, selection):
        coords = coordinates(selection, self.table)
        if len(coords) != 1:
            raise ResolutionError(f"def _{command.slot} needs a single cell, got {selection!r}")
        row, col = coords[0]
        self.variables.store(command.slot, self.table.get(row, col))

    def _use(self, command, selection):
        value = self.variables.get(command.slot)
        for row, col in coordinates(selection, self.table):
            self.table.set(row, col, value)

    def _increment(self, command, selection):
        self.variables.store(command.slot, increment_text(self.variables.get(command.slot)))

    def _capture(self, command, selection):
        self.variables.capture(selection)

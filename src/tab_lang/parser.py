import re
from .errors import ParseError
from .lexer import VARIABLE_RE, TARGET_DATA_RE, is_single_word
from .ast import (
    OPEN, Cell, Row, Col, Box, WholeTable, Min, Max, Substring, RestoredVariable,
    ModificationKind, DataKind, VariableKind,
    StructuralModification, DataOperation, VariableOperation, Call
)

INTEGER_RE = re.compile(r'[+-]?\d+')
FIND_PREFIX = 'find '


# Parser class converts classified tokens into a Call
class Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.call = Call()

    # Main parsing method that processes all tokens in script order
    def parse(self):
        if not self.tokens:
            raise ParseError("Not enough commands given")
        handlers = {
            'SELECTION': self._selection,
            'MODIFICATION': self._modification,
            'DATA': self._data,
            'VARIABLE': self._variable,
        }
        while self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            handlers[token.type](token)
            self.pos += 1
        return self.call

    # Parses a bracketed selection and appends it to the call
    def _selection(self, token):
        inner = token.value[1:-1]
        ref = self.call.current_selection()
        if inner == '_':
            selection = RestoredVariable()
        elif inner == 'min':
            selection = Min(ref)
        elif inner == 'max':
            selection = Max(ref)
        elif inner.startswith(FIND_PREFIX) and len(inner) > len(FIND_PREFIX):
            pattern = inner[len(FIND_PREFIX):]
            if not is_single_word(pattern):
                raise ParseError(self._error(token, "Invalid find selection"))
            selection = Substring(pattern, ref)
        else:
            parts = [part.strip() for part in inner.split(',')]
            if len(parts) == 2:
                selection = self._grid_selection(token, parts)
            elif len(parts) == 4:
                selection = self._box_selection(token, parts)
            else:
                raise ParseError(self._error(token, "Invalid selection"))
        self.call.add_selection(selection)

    def _grid_selection(self, token, parts):
        row, col = parts
        if row == '_' and col == '_':
            return WholeTable()
        if row == '_':
            return Col(self._coordinate(token, col))
        if col == '_':
            return Row(self._coordinate(token, row))
        return Cell(self._coordinate(token, row), self._coordinate(token, col))

    def _box_selection(self, token, parts):
        row1 = self._coordinate(token, parts[0])
        col1 = self._coordinate(token, parts[1])
        row2 = OPEN if parts[2] == '-' else self._coordinate(token, parts[2])
        col2 = OPEN if parts[3] == '-' else self._coordinate(token, parts[3])
        if (row2 is not OPEN and row2 < row1) or (col2 is not OPEN and col2 < col1):
            raise ParseError(self._error(token, "Invalid box selection"))
        return Box(row1, col1, row2, col2)

    def _modification(self, token):
        kind = ModificationKind(token.value)
        self.call.add_command(StructuralModification(kind, self.call.current_selection()))

    def _data(self, token):
        selection = self.call.current_selection()
        text = token.value
        if text == 'clear':
            command = DataOperation(DataKind.CLEAR, selection)
        elif text.startswith('set '):
            command = DataOperation(DataKind.SET, selection, text=text[4:])
        else:
            name, argument = TARGET_DATA_RE.fullmatch(text).groups()
            row, col = [part.strip() for part in argument[1:-1].split(',')]
            command = DataOperation(
                DataKind(name), selection,
                target_row=self._coordinate(token, row, "Invalid argument"),
                target_col=self._coordinate(token, col, "Invalid argument"))
        self.call.add_command(command)

    def _variable(self, token):
        selection = self.call.current_selection()
        if token.value == '[set]':
            self.call.add_command(VariableOperation(VariableKind.CAPTURE, selection))
            return
        name, slot = VARIABLE_RE.fullmatch(token.value).groups()
        self.call.add_command(VariableOperation(VariableKind(name), selection, int(slot)))

    def _coordinate(self, token, text, message="Invalid selection"):
        """Converts a 1-based coordinate written in the script to a 0-based index."""
        if not INTEGER_RE.fullmatch(text):
            raise ParseError(self._error(token, message))
        value = int(text)
        if value < 1:
            raise ParseError(self._error(token, "Invalid argument"))
        return value - 1

    def _error(self, token, message):
        return f"{message} '{token.value}' at command {token.index}, column {token.column}"

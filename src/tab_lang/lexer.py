import re
from .errors import ParseError

SEPARATOR = ';'

VARIABLE_RE = re.compile(r'(def|use|inc) _([0-9])')
MODIFICATIONS = ('irow', 'arow', 'drow', 'icol', 'acol', 'dcol')
TARGET_DATA_RE = re.compile(r'(swap|sum|avg|count|len) (\[.*\])')


# Token class represents one classified fragment of the script
class Token:
    def __init__(self, type, value, index=1, column=1):
        self.type = type      # VARIABLE, MODIFICATION, DATA or SELECTION
        self.value = value    # Trimmed fragment text
        self.index = index    # 1-based position of the fragment in the script
        self.column = column  # 1-based column of the fragment in the script

    def __str__(self):
        return f"Token({self.type}, {self.value}, index={self.index}, col={self.column})"


def is_single_word(text):
    """Checks that text has no unquoted space and that its quotes are balanced.

    A backslash escapes the next character, so an escaped quote does not
    open or close quoting.
    """
    quoted = False
    escaped = False
    for char in text:
        if char == '\\' and not escaped:
            escaped = True
            continue
        if char == '"' and not escaped:
            quoted = not quoted
        elif char == ' ' and not quoted:
            return False
        escaped = False
    return not quoted


def is_variable(fragment):
    return fragment == '[set]' or VARIABLE_RE.fullmatch(fragment) is not None


def is_modification(fragment):
    return fragment in MODIFICATIONS


def is_data(fragment):
    if fragment == 'clear':
        return True
    if fragment.startswith('set '):
        return len(fragment) > 4 and is_single_word(fragment[4:])
    return TARGET_DATA_RE.fullmatch(fragment) is not None and fragment.count(',') == 1


def is_selection(fragment):
    if fragment.count(',') not in (0, 1, 3):
        return False
    return len(fragment) >= 2 and fragment[0] == '[' and fragment[-1] == ']'


# Checked in this order, the first match decides the token type
CLASSIFIERS = (
    ('VARIABLE', is_variable),
    ('MODIFICATION', is_modification),
    ('DATA', is_data),
    ('SELECTION', is_selection),
)


def classify(fragment):
    for type, check in CLASSIFIERS:
        if check(fragment):
            return type
    return None


# Lexer splits a script into fragments and classifies each of them
class Lexer:
    def __init__(self, text):
        self.text = text
        self.tokens = []

    def tokenize(self):
        column = 1
        index = 0
        for raw in self.text.split(SEPARATOR):
            fragment = raw.strip()
            start = column + (len(raw) - len(raw.lstrip()))
            column += len(raw) + 1
            # Empty fragments such as ';;' are skipped
            if not fragment:
                continue
            index += 1
            type = classify(fragment)
            if type is None:
                raise ParseError(
                    f"Unknown command '{fragment}' at command {index}, column {start}")
            self.tokens.append(Token(type, fragment, index, start))
        return self.tokens

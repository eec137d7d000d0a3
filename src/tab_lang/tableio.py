"""
Reading and writing delimited tables.

Cells are separated by any character of the delimiter string and rows by
newlines. Double quotes protect delimiters and newlines inside a cell and a
backslash escapes the next character. On output the first delimiter
character is used and only cells that need it are quoted.
"""
from .errors import ConfigError, ParseError
from .table import Table

DEFAULT_DELIMITER = ' '
FORBIDDEN_DELIMITER_CHARS = '\\"'


def validate_delimiter(delimiters):
    if not delimiters:
        raise ConfigError("Delimiter not given")
    if any(char in FORBIDDEN_DELIMITER_CHARS for char in delimiters):
        raise ConfigError("Delimiter contains an invalid character")
    return delimiters


def read_table(text, delimiters=DEFAULT_DELIMITER):
    """Parses delimited text into a Table.

    Args:
        text (str): The file content
        delimiters (str): Characters that separate cells

    Returns:
        Table: Rows padded to the width of the widest row
    """
    rows = []
    row = []
    cell = []
    quoted = False
    escaped = False
    line = 1
    for char in text:
        # An escaped newline outside quotes still ends the row
        if escaped and not (char == '\n' and not quoted):
            cell.append(char)
            escaped = False
            continue
        if char == '\\':
            escaped = True
            continue
        if char == '"':
            quoted = not quoted
            continue
        if not quoted and char == '\n':
            row.append(''.join(cell))
            rows.append(row)
            row, cell = [], []
            escaped = False
            line += 1
            continue
        if not quoted and char in delimiters:
            row.append(''.join(cell))
            cell = []
            continue
        if char == '\n':
            line += 1
        cell.append(char)

    if quoted:
        raise ParseError(f"Unbalanced quotes in table input at line {line}")
    # Last line without a trailing newline
    if row or cell:
        row.append(''.join(cell))
        rows.append(row)
    return Table(rows)


def format_cell(content, delimiters=DEFAULT_DELIMITER):
    escaped = content.replace('\\', '\\\\').replace('"', '\\"')
    if '\n' in content or any(char in content for char in delimiters):
        return f'"{escaped}"'
    return escaped


def write_table(table, delimiters=DEFAULT_DELIMITER):
    """Serializes a Table, one line per row, joined with the first delimiter character."""
    separator = delimiters[0]
    lines = []
    for row in table.rows:
        lines.append(separator.join(format_cell(cell, delimiters) for cell in row) + '\n')
    return ''.join(lines)


def load_table(path, delimiters=DEFAULT_DELIMITER):
    with open(path, 'r', newline=None) as file:
        return read_table(file.read(), delimiters)


def save_table(table, path, delimiters=DEFAULT_DELIMITER):
    content = write_table(table, delimiters)
    with open(path, 'w', newline='') as file:
        file.write(content)

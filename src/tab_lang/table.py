# The mutable grid of string cells and its structural operations
import re
import pyarrow as pa

# Leading numeric token accepted in a cell, in the manner of C's strtod
_NUMBER_RE = re.compile(
    r'\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)', re.I)


def cell_number(text):
    """Returns the numeric value of a cell, or None if it is not numeric.

    A cell is numeric when it is non-empty, starts with a number and has
    nothing but spaces after it.
    """
    if not text:
        return None
    match = _NUMBER_RE.match(text)
    if not match:
        return None
    if text[match.end():].strip(' '):
        return None
    return float(match.group().strip())


class Table:
    def __init__(self, rows=None, width=None):
        self.rows = [list(row) for row in rows or []]
        if width is None:
            width = max((len(row) for row in self.rows), default=0)
        self.width = width
        # Pad ragged input so every row has the same number of cells
        for row in self.rows:
            row.extend([''] * (width - len(row)))

    @property
    def height(self):
        return len(self.rows)

    def get(self, row, col):
        return self.rows[row][col]

    def set(self, row, col, value):
        self.rows[row][col] = value

    def swap_cells(self, first, second):
        (r1, c1), (r2, c2) = first, second
        self.rows[r1][c1], self.rows[r2][c2] = self.rows[r2][c2], self.rows[r1][c1]

    def last_row(self):
        return self.height - 1

    def last_col(self):
        return self.width - 1

    def to_list(self):
        return [list(row) for row in self.rows]

    # Growth and shrinking at the end of the table
    def add_rows(self, count):
        for _ in range(count):
            self.rows.append([''] * self.width)

    def add_cols(self, count):
        for row in self.rows:
            row.extend([''] * count)
        self.width += count

    def drop_last_row(self):
        self.rows.pop()

    def drop_last_col(self):
        for row in self.rows:
            row.pop()
        self.width -= 1

    def clear(self):
        """Removes every row and column."""
        self.rows = []
        self.width = 0

    def expand(self, rows, cols):
        """Grows the table so that it has at least `rows` rows and `cols` columns."""
        if rows > self.height:
            self.add_rows(rows - self.height)
        if cols > self.width:
            self.add_cols(cols - self.width)

    # Swap-chain shifts: only adjacent rows/columns ever change places
    def move_row(self, index_from, index_to):
        step = 1 if index_from < index_to else -1
        while index_from != index_to:
            rows = self.rows
            rows[index_from], rows[index_from + step] = rows[index_from + step], rows[index_from]
            index_from += step

    def move_col(self, index_from, index_to):
        step = 1 if index_from < index_to else -1
        for row in self.rows:
            i = index_from
            while i != index_to:
                row[i], row[i + step] = row[i + step], row[i]
                i += step

    def insert_row_before(self, row):
        self.add_rows(1)
        self.move_row(self.last_row(), row)

    def insert_row_after(self, row):
        self.add_rows(1)
        self.move_row(self.last_row(), row + 1)

    def delete_row(self, row):
        self.move_row(row, self.last_row())
        self.drop_last_row()

    def insert_col_before(self, col):
        self.add_cols(1)
        self.move_col(self.last_col(), col)

    def insert_col_after(self, col):
        self.add_cols(1)
        self.move_col(self.last_col(), col + 1)

    def delete_col(self, col):
        self.move_col(col, self.last_col())
        self.drop_last_col()

    def trim(self):
        """Drops trailing columns that are empty in every row."""
        if not self.rows:
            return
        while self.width > 0:
            col = self.last_col()
            if any(row[col] for row in self.rows):
                break
            self.drop_last_col()

    def numeric_values(self, coords):
        """Returns a float64 array of the cells at `coords`, null where not numeric."""
        values = [cell_number(self.rows[r][c]) for r, c in coords]
        return pa.array(values, type=pa.float64())

    def __repr__(self):
        return f"Table({self.height}x{self.width})"

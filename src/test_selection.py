import pytest
from tab_lang.errors import ResolutionError
from tab_lang.table import Table
from tab_lang.variables import VariableStore
from tab_lang.ast import OPEN, Cell, Row, Col, Box, WholeTable, Min, Max, Substring, RestoredVariable
from tab_lang.selection import SelectionResolver, bounds, coordinates, is_subsequence


@pytest.fixture
def table():
    return Table([
        ['5', 'apple', '7'],
        ['2', 'x', 'grape'],
        ['8', '2', 'apricot'],
    ])


def resolver(table, variables=None):
    return SelectionResolver(table, variables or VariableStore())


def test_bounds(table):
    assert bounds(Cell(1, 2), table) == (1, 2, 1, 2)
    assert bounds(Row(1), table) == (1, 0, 1, 2)
    assert bounds(Col(0), table) == (0, 0, 2, 0)
    assert bounds(Box(1, 1, OPEN, OPEN), table) == (1, 1, 2, 2)
    assert bounds(WholeTable(), table) == (0, 0, 2, 2)


def test_coordinates_are_row_major_and_clipped(table):
    assert coordinates(Box(0, 1, 1, 2), table) == [(0, 1), (0, 2), (1, 1), (1, 2)]
    assert coordinates(Box(1, 1, 9, 9), table) == [(1, 1), (1, 2), (2, 1), (2, 2)]
    assert coordinates(Row(7), table) == []


def test_concrete_selections_resolve_to_themselves(table):
    selection = Row(1)
    assert resolver(table).resolve(selection) is selection


def test_min_over_column(table):
    cell = resolver(table).resolve(Min(Col(0)))
    assert isinstance(cell, Cell)
    assert (cell.row, cell.col) == (1, 0)


def test_max_over_table(table):
    cell = resolver(table).resolve(Max(WholeTable()))
    assert (cell.row, cell.col) == (2, 0)


def test_min_tie_keeps_first_cell(table):
    cell = resolver(table).resolve(Min(Box(1, 0, 2, 2)))
    assert (cell.row, cell.col) == (1, 0)


def test_min_without_numbers_fails(table):
    with pytest.raises(ResolutionError):
        resolver(table).resolve(Min(Cell(0, 1)))


def test_find_last_match_wins(table):
    cell = resolver(table).resolve(Substring('ap', WholeTable()))
    assert (cell.row, cell.col) == (2, 2)


def test_find_is_ordered_subsequence(table):
    cell = resolver(table).resolve(Substring('gpe', Row(1)))
    assert (cell.row, cell.col) == (1, 2)
    with pytest.raises(ResolutionError):
        resolver(table).resolve(Substring('pg', Row(1)))


def test_find_unescapes_pattern():
    table = Table([['a b', 'ab']])
    cell = resolver(table).resolve(Substring('"a b"', Row(0)))
    assert (cell.row, cell.col) == (0, 0)


def test_nested_dynamic_reference(table):
    # max of the cell found by [find grape] is not numeric
    with pytest.raises(ResolutionError):
        resolver(table).resolve(Max(Substring('grape', WholeTable())))
    cell = resolver(table).resolve(Max(Min(Col(0))))
    assert (cell.row, cell.col) == (1, 0)


def test_restored_variable(table):
    variables = VariableStore()
    with pytest.raises(ResolutionError):
        resolver(table, variables).resolve(RestoredVariable())
    captured = Row(2)
    variables.capture(captured)
    assert resolver(table, variables).resolve(RestoredVariable()) is captured


def test_is_subsequence():
    assert is_subsequence('ace', 'abcde')
    assert is_subsequence('', 'abc')
    assert not is_subsequence('ca', 'abc')

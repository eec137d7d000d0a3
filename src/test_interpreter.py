import pytest
from tab_lang import run_script
from tab_lang.errors import ResolutionError
from tab_lang.table import Table


def run(code, rows, delimiters=' '):
    return run_script(code, Table(rows), delimiters).to_list()


def test_irow_then_drow_restores_rows():
    rows = [['a'], ['b'], ['c']]
    assert run("[2,_];irow", rows) == [['a'], [''], ['b'], ['c']]
    assert run("[2,_];irow;drow", rows) == [['a'], ['b'], ['c']]


def test_sum_and_avg_over_box():
    rows = [['1', '2'], ['3', '4']]
    assert run("[1,1,2,2];sum [1,1]", rows)[0][0] == '10'
    assert run("[1,1,2,2];avg [1,1]", rows)[0][0] == '2.5'


def test_sum_expands_table_for_target():
    assert run("[1,1,2,2];sum [3,1]", [['1', '2'], ['3', '4']]) == [['1', '2'], ['3', '4'], ['10', '']]


def test_avg_skips_non_numeric_cells():
    assert run("[1,_];avg [2,1]", [['1', 'x', '3']]) == [['1', 'x', '3'], ['2', '', '']]


def test_avg_without_numbers():
    assert run("[1,_];avg [2,1]", [['a', 'b']])[1][0] == 'nan'


def test_min_in_column():
    assert run("[_,1];[min];set x", [['5'], ['2'], ['8']]) == [['5'], ['x'], ['8']]


def test_min_without_numbers_fails():
    with pytest.raises(ResolutionError):
        run("[_,1];[min];set x", [['a'], ['b']])


def test_dynamic_selection_sees_earlier_changes():
    assert run("[1,1];set 100;[_,1];[max];set top", [['1'], ['9']]) == [['top'], ['9']]


def test_find_and_set():
    rows = [['apple', 'banana'], ['cherry', 'apricot']]
    assert run("[_,_];[find ap];set X", rows) == [['apple', 'banana'], ['cherry', 'X']]


def test_define_increment_use():
    assert run("[1,1];def _0;inc _0;[1,2];use _0", [['4', '']]) == [['4', '5']]


def test_increment_empty_register():
    assert run("[1,1];inc _3;use _3", [['x']]) == [['1']]


def test_define_needs_single_cell():
    with pytest.raises(ResolutionError):
        run("[1,_];def _0", [['a', 'b']])


@pytest.mark.parametrize("code, rows, expected", [
    ("[1,1,1,1];def _0;[1,2];use _0", [['4', 'x']], [['4', '4']]),
    ("[1,_];def _0;[2,1];use _0", [['4']], [['4'], ['4']]),
    ("[_,1];def _0;[1,2];use _0", [['7']], [['7', '7']]),
])
def test_define_accepts_any_single_cell_selection(code, rows, expected):
    assert run(code, rows) == expected


def test_increment_ignores_unresolvable_selection():
    # [min] over a column without numbers would fail to resolve
    assert run("[_,1];[min];inc _0;[1,1];use _0", [['a']]) == [['1']]


def test_increment_does_not_grow_table():
    assert run("[5,5];inc _0;[1,1];use _0", [['a']]) == [['1']]


def test_capture_and_restore_selection():
    rows = [['1', '2'], ['3', '4']]
    assert run("[2,2];[set];[1,1];set a;[_];set b", rows) == [['a', '2'], ['3', 'b']]


def test_restore_without_capture_fails():
    with pytest.raises(ResolutionError):
        run("[_];set b", [['a']])


def test_clear_then_count_is_zero():
    rows = [['a', 'b'], ['c', 'd']]
    assert run("[1,_];clear;count [1,1]", rows) == [['0', ''], ['c', 'd']]


def test_set_table_then_count_cell():
    rows = [['a', 'b'], ['c', 'd']]
    assert run('[_,_];set "x";[1,1];count [2,2]', rows) == [['x', 'x'], ['x', '1']]


def test_swap_is_sequential():
    assert run("[1,_];swap [1,3]", [['a', 'b', 'c']]) == [['c', 'a', 'b']]


def test_swap_single_cell():
    assert run("[1,1];swap [2,2]", [['a', 'b'], ['c', 'd']]) == [['d', 'b'], ['c', 'a']]


def test_len_reports_representative_cell():
    assert run("[1,_];len [2,1]", [['abc', 'de']]) == [['abc', 'de'], ['2', '']]
    assert run("[1,1];len [1,2]", [['abc']]) == [['abc', '3']]


def test_commands_before_selection_use_first_cell():
    assert run("set hi", [['a', 'b']]) == [['hi', 'b']]


def test_set_quoted_text():
    assert run('set "a b"', [['x']]) == [['a b']]


def test_set_stops_at_delimiter():
    assert run('set a:b', [['x']], delimiters=':') == [['a']]


def test_selection_beyond_table_expands_it():
    assert run("[3,4];set z", [['a']]) == [
        ['a', '', '', ''],
        ['', '', '', ''],
        ['', '', '', 'z'],
    ]


def test_trailing_empty_columns_are_trimmed():
    assert run("[1,1];set b", [['a', '', '']]) == [['b']]


def test_data_commands_keep_dimensions():
    rows = [['1', '2', '3'], ['4', '5', '6']]
    result = run("[_,_];set 0;[1,1,2,2];clear;[2,3];set q", rows)
    assert len(result) == 2 and all(len(row) == 3 for row in result)


def test_icol_on_whole_table():
    assert run("[_,_];icol", [['a', 'b']]) == [['', 'a', '', 'b']]


def test_irow_on_column_inserts_before_every_row():
    assert run("[_,1];irow", [['a'], ['b']]) == [[''], ['a'], [''], ['b']]


def test_arow_on_box():
    assert run("[1,1,2,1];arow", [['a'], ['b'], ['c']]) == [['a'], [''], ['b'], [''], ['c']]


def test_acol_on_cell():
    assert run("[1,1];acol", [['a', 'b']]) == [['a', '', 'b']]


def test_drow_on_open_box():
    assert run("[2,1,-,1];drow", [['a'], ['b'], ['c']]) == [['a']]


def test_dcol_on_box():
    assert run("[1,2,1,3];dcol", [['a', 'b', 'c', 'd']]) == [['a', 'd']]


def test_drow_on_column_clears_table():
    assert run("[_,1];drow", [['a'], ['b']]) == []


def test_dcol_on_row_clears_table():
    assert run("[1,_];dcol", [['a', 'b']]) == []


def test_commands_after_clearing_rebuild_table():
    assert run("[_,1];drow;[2,2];set x", [['a'], ['b']]) == [['', ''], ['', 'x']]


def test_open_box_follows_current_table_size():
    rows = [['1'], ['2']]
    # after arow the last row of the open box is a new empty row
    assert run("[1,1,-,1];arow;len [1,2]", rows)[0] == ['1', '0']

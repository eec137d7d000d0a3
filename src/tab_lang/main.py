from .lexer import Lexer
from .parser import Parser
from .interpreter import Interpreter
from .tableio import DEFAULT_DELIMITER, load_table, save_table, validate_delimiter


def parse_script(code, debug=False):
    """Tokenizes and parses a script into a Call without touching any table."""
    tokens = Lexer(code).tokenize()
    if debug:
        print("Tokens:", [str(t) for t in tokens])
    call = Parser(tokens).parse()
    if debug:
        print("Commands:")
        for command in call.commands:
            print(f"  {command!r}")
    return call


def run_script(code, table, delimiters=DEFAULT_DELIMITER, debug=False):
    """Run a tablang script against a table.

    Args:
        code (str): The script, commands separated by ';'
        table (Table): The table to edit in place
        delimiters (str): Delimiter characters, used when unescaping arguments
        debug (bool): If True, prints the parsed commands and each execution step

    Returns:
        Table: The edited table with trailing empty columns trimmed
    """
    call = parse_script(code, debug)
    if debug:
        print("\nInterpreting...")
    result = Interpreter(table, delimiters, debug).interpret(call)
    if debug:
        print(f"\nTable State ({result.height}x{result.width}):")
        for row in result.rows:
            print(row)
    return result


def run_file(code, input_path, output_path=None, delimiters=DEFAULT_DELIMITER, debug=False):
    """Edits a table file with a script; the file is only written if the whole script succeeds.

    The script is parsed before the file is read, so a malformed script
    never touches the file. Without output_path the input file is rewritten.
    """
    validate_delimiter(delimiters)
    call = parse_script(code, debug)
    table = load_table(input_path, delimiters)
    if debug:
        print(f"\nLoaded {input_path} ({table.height}x{table.width})")
    result = Interpreter(table, delimiters, debug).interpret(call)
    save_table(result, output_path or input_path, delimiters)
    return result

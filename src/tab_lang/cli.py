import sys
import argparse
from .errors import TabLangError
from .main import run_file
from .tableio import DEFAULT_DELIMITER


def build_parser():
    parser = argparse.ArgumentParser(
        prog='tablang',
        description='Edit a delimited text table with a script of ;-separated commands')
    parser.add_argument('-d', '--delimiter', default=DEFAULT_DELIMITER,
                        help='Cell delimiter characters, the first one is used for output (default: space)')
    parser.add_argument('-o', '--output', help='Write the result here instead of rewriting FILE')
    parser.add_argument('--debug', action='store_true', help='Print parsed commands and each execution step')
    parser.add_argument('script', help="Command sequence, e.g. '[1,1];set x;[2,_];irow'")
    parser.add_argument('filename', help='Path to the table file to edit')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        run_file(args.script, args.filename, args.output, args.delimiter, debug=args.debug)
    except FileNotFoundError as e:
        print(f"Error: File '{e.filename}' not found", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except TabLangError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

"""
Table Language Interpreter

Edit delimited text tables with a small script of selections and commands.
"""

from .main import run_script, run_file
from .table import Table
from .tableio import read_table, write_table

__version__ = "0.1.0"
__all__ = ["run_script", "run_file", "Table", "read_table", "write_table"]

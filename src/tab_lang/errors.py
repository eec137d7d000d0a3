# Error classes raised by the tablang interpreter
# Every error is fatal: the CLI reports it and nothing is written


class TabLangError(Exception):
    pass


# Malformed script fragment, bad selection, negative argument or unbalanced quotes
class ParseError(TabLangError, SyntaxError):
    pass


# A dynamic selection could not be resolved against the table content
class ResolutionError(TabLangError, LookupError):
    pass


class AllocationError(TabLangError, MemoryError):
    pass


# Invalid command-line configuration (e.g. a delimiter containing a quote)
class ConfigError(TabLangError, ValueError):
    pass

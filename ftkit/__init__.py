"""ASCII and string helpers, a line reader, a two-command pipeline runner and a push_swap sorter."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "strings",
    "output",
    "textops",
    "linereader",
    "pipex",
    "stack",
    "pushswap",
]
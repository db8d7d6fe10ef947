import os
import sys

FALLBACK_COLUMNS = 80


def terminal_columns(stream=None) -> int:
    """Width of the terminal behind stream (stdout by default).

    Piped or redirected output, or a descriptor the OS cannot size,
    gets FALLBACK_COLUMNS.
    """
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        return FALLBACK_COLUMNS
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except OSError:
        return FALLBACK_COLUMNS

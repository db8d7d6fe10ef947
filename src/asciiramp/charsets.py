from collections.abc import Sequence

from asciiramp.errors import InvalidParameter

# Every ramp runs from darkest (densest) to lightest (sparsest).
DEFAULT = "@%#*+=-:. "

DENSE = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

BLOCKS = "█▓▒░ "

# Short ramp paired with the reduced-feature configuration.
SIMPLE = "@#+-. "

RAMPS = {
    "default": DEFAULT,
    "dense": DENSE,
    "blocks": BLOCKS,
    "simple": SIMPLE,
}


def validate_ramp(ramp: str | Sequence[str]) -> tuple[str, ...]:
    """Return the ramp as a tuple of single-character symbols."""
    symbols = tuple(ramp)
    if not symbols:
        raise InvalidParameter("Ramp must contain at least one symbol")
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidParameter(f"Ramp symbols must be single characters, got {symbol!r}")
    return symbols

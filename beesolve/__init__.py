"""Solutions to classic programming-judge problems, as functions and commands."""

__version__ = "0.1.0"

__all__ = [
    "brainfuck",
    "consumption",
    "interleave",
    "marbles",
    "pages",
    "paper",
    "pequi",
    "sheep",
    "staircase",
    "substring",
    "telephone",
]
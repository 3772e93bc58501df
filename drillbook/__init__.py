"""Classic programming drills: patterns, strings, stacks, brackets, heaps, prefix sums, multistage graphs and sieves."""

__version__ = "0.1.0"

__all__ = [
    "patterns",
    "text",
    "stack",
    "brackets",
    "heaps",
    "prefix",
    "multistage",
    "sieve",
]
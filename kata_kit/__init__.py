"""Solutions to small programming puzzles: digit-string arithmetic, numbers, text, sequences, a greeter and linked lists."""

__version__ = "0.1.0"
__all__ = [
    "bigint",
    "numeric",
    "text",
    "calculator",
    "sequences",
    "greeter",
    "linked_list",
]
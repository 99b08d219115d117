"""Sort integers with two stacks and check operation sequences that do so."""

__version__ = "1.0.0"
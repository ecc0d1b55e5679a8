"""Pack tetrominoes into a small square, with the text helpers the program uses."""

__version__ = "0.1.0"
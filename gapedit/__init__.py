"""A small graphical text editor built on gap buffers, with an editing model usable on its own."""

__version__ = "0.1.0"
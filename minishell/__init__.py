"""Building blocks of a small command shell: character tests, string helpers,
an environment dictionary, printf-style output, a line reader and a
command-node builder."""

__version__ = "0.1.0"
__all__ = ["chars", "envdict", "ftstring", "ast", "printf", "linereader"]
"""Building blocks of a small statically typed scripting language: format
specifiers, syntax trees, constant folding, slot maps, string interning and
the native file, math and time functions."""

__version__ = "0.1.0"
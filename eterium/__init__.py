"""A small top-down role-playing adventure: a knight, a wizard and the broken Eterium."""

__version__ = "0.1.0"
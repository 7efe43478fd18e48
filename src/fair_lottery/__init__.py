"""
fair-lottery: assign indivisible items to interested people.

"""

__version__ = "0.1.0"

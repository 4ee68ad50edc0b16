"""
SRD character sheet engine.

Models characters, their advancement by experience, spell-slot allotment,
armor class and a multi-denomination currency.
"""

__version__ = "0.1.0"

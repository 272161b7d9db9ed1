"""
Royal Quest chat log mob counter

Parses exported chat logs and reports how many monsters of each kind were
killed and how much experience they were worth.
"""

__version__ = "0.1.0"
__author__ = "RQ Mob Counter Team"

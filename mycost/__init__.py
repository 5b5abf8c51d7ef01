"""
MyCost - Core Package

The pure computational core of a personal income/expense ledger:
the keypad expression evaluator and the statistics engine that
feeds the reporting views.

DESIGN PRINCIPLES:
1. Every call is a pure function of its inputs
2. Expected bad input yields an explicit "no value", never a fake number
3. Records are immutable snapshots handed in by the data layer
4. Presentation decides how to render; this package decides what to render
"""

__version__ = "1.0.0"
__author__ = "MyCost Team"

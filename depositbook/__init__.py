"""
Depositbook - Source Package

An interactive console ledger of bank depositors.

DESIGN PRINCIPLES:
1. Every depositor picks a deposit plan once, at signup
2. Fail early, fail visibly
3. No silent corrections
4. One bad input never ends the session
5. Identifiers and plans are swappable behind interfaces
"""

__version__ = "1.0.0"
__author__ = "Depositbook Team"

"""
CORPORATE COORDINATES - Where Are We In The Quarter?

Answers one question only:
"How far into the current calendar quarter are we, and how much is left?"

Design Principles:
- Fiscal year always starts January 1
- One clock read per invocation, offset frozen at capture
- Pure, deterministic date arithmetic
- Nothing persisted, nothing configured at runtime
"""

__version__ = "1.0.0"

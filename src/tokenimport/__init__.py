"""
Canonical Token Model (CTM) Package

Converts design-token documents (JSON, simple or DTCG dialect, and CSV)
into a normalized, typed model of variable collections.

ARCHITECTURAL GUARANTEE:
------------------------
The parsing core contains ZERO knowledge of:
    - File systems or network I/O
    - UI state
    - The host application's variable objects

This package defines TOKEN STRUCTURE only.

Writing a model into a variable store happens in tokenimport.backends,
through the abstract VariableStore interface.
"""

__version__ = "0.1.0"

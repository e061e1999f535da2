"""
connect4_engine.interfaces - Hosts for the Connect Four engine

This package contains front ends that drive the engine. They only use the
public game API and hold no rule logic of their own.
"""

# Don't import anything here to avoid circular imports
__all__ = []

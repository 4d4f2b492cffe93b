"""Rules engine boundary: the abstract interface and its python-chess adapter."""

from chessgui.engine.interfaces import IRulesEngine
from chessgui.engine.python_chess import PythonChessEngine

__all__ = [
    "IRulesEngine",
    "PythonChessEngine",
]

# models/__init__.py

from .attendance import Attendance

__all__ = [
    "Attendance",
]

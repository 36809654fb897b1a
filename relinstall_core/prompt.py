"""Line-oriented yes/no and free-text prompts on stdin."""

from __future__ import annotations
from typing import Optional, TextIO
import sys


def _readline(stream: Optional[TextIO]) -> str:
    return (stream or sys.stdin).readline()


def answer(default: str, stream: Optional[TextIO] = None) -> str:
    a = _readline(stream).strip()
    if not a:
        return default
    return a


def yes(stream: Optional[TextIO] = None) -> bool:
    a = _readline(stream).strip().upper()
    return a.startswith("Y")

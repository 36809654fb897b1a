"""
relinstall_core.utils
---------------------
Small filesystem helpers used by the installer flow.
"""

from __future__ import annotations
import os


def exist(path) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True

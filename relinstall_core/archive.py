"""
relinstall_core.archive
-----------------------
Tar extraction for release archives. Compression is detected by tarfile.
"""

from __future__ import annotations
from pathlib import Path
from typing import List
import os
import tarfile

from .errors import ArchiveError
from .logger import get_logger

log = get_logger("relinstall.archive")


def _member_filter(ignore_ownership: bool):
    def _filter(member: tarfile.TarInfo, dest_path: str):
        # rejects absolute paths, traversal and links leaving dest_path
        member = tarfile.tar_filter(member, dest_path)
        if ignore_ownership:
            member = member.replace(uid=None, gid=None, uname=None, gname=None, deep=False)
        return member
    return _filter


def unpack_archive(source, destination, ignore_ownership: bool = True) -> List[str]:
    """
    Extract the tar archive ``source`` into ``destination``.

    With ``ignore_ownership`` file owners recorded in the archive are not
    applied, which is what an unprivileged install needs.
    Returns the names of the extracted members.
    """
    dest = Path(destination)
    log.info(f"[UNPACK] {source} -> {dest}")
    try:
        os.makedirs(dest, exist_ok=True)
        with tarfile.open(source, "r:*") as tar:
            names = tar.getnames()
            tar.extractall(dest, filter=_member_filter(ignore_ownership))
    except tarfile.TarError as e:
        raise ArchiveError(f"cannot unpack {source}: {e}") from e
    except OSError as e:
        raise ArchiveError(f"cannot unpack {source} into {dest}: {e}") from e

    log.debug(f"[UNPACK] {len(names)} member(s) extracted")
    return names

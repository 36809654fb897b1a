"""
relinstall_core.download
------------------------
HTTP download of release artifacts. Bodies are streamed to a ``.part`` file
and moved into place only once complete; there are no retries.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional
import os

import requests

from .config import DEFAULT_DOWNLOAD_TIMEOUT
from .errors import DownloadError
from .logger import get_logger

log = get_logger("relinstall.download")

CHUNK_SIZE = 65536


class Downloader:
    def __init__(self, timeout: float = DEFAULT_DOWNLOAD_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "relinstall/1.0"})

    @classmethod
    def from_config(cls, cfg) -> "Downloader":
        return cls(timeout=cfg.download_timeout)

    def fetch(self, url: str, destination) -> Path:
        """Download ``url`` to ``destination`` and return the final path."""
        dest = Path(destination)
        part = dest.with_name(dest.name + ".part")
        log.info(f"[DOWNLOAD] {url} -> {dest}")

        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as res:
                if not res.ok:
                    raise DownloadError(
                        f"GET {url}: {res.status_code} {res.reason}", url=url, status=res.status_code
                    )
                dest.parent.mkdir(parents=True, exist_ok=True)
                with open(part, "wb") as f:
                    for chunk in res.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            os.replace(part, dest)
        except DownloadError:
            log.error(f"[DOWNLOAD] {url} failed")
            raise
        except (requests.RequestException, OSError) as e:
            log.error(f"[DOWNLOAD] {url} failed: {e}")
            raise DownloadError(f"GET {url}: {e}", url=url) from e
        finally:
            if part.exists():
                part.unlink()

        return dest

"""Asset store backed by a directory on local disk."""

import re
from pathlib import Path, PurePosixPath
from uuid import uuid4

from storefront.assets.port import AssetStore

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class LocalAssetStore(AssetStore):
    """Writes files to ``root`` and hands out paths under ``url_prefix``."""

    def __init__(self, root: Path, url_prefix: str = "/images"):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, filename: str, content: bytes) -> str:
        self.root.mkdir(parents=True, exist_ok=True)

        safe_name = _UNSAFE_CHARS.sub("-", PurePosixPath(filename or "upload").name) or "upload"
        stored_name = f"{uuid4().hex}-{safe_name}"
        (self.root / stored_name).write_bytes(content)

        return f"{self.url_prefix}/{stored_name}"

    def delete(self, path: str) -> None:
        (self.root / self._stored_name(path)).unlink()

    def exists(self, path: str) -> bool:
        return (self.root / self._stored_name(path)).is_file()

    def _stored_name(self, path: str) -> str:
        # Only the last segment is used, so paths cannot climb out of root
        return PurePosixPath(path).name

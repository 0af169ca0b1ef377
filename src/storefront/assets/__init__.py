"""Asset store registry: where uploaded product images live."""

from pathlib import Path

_store = None


def get_asset_store():
    """Return the configured asset store (singleton)."""
    global _store
    if _store is None:
        from storefront.assets.local_store import LocalAssetStore

        _store = LocalAssetStore(root=Path("images"))
    return _store


def set_asset_store(store):
    global _store
    _store = store


def reset_asset_store():
    global _store
    _store = None

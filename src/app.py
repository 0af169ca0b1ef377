"""Storefront FastAPI application.

Commands are processed synchronously inside each request, and every request
runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - default      → event_processing = "sync"  (mail goes out in the UoW)
#   - "production" → event_processing = "async" (mail goes out via the Engine)
from storefront.api.application import create_app
from storefront.domain import storefront

storefront.init()

app = create_app()

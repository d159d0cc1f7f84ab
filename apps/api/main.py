import hmac
import logging
import time
from typing import Optional

import requests
from fastapi import Depends, FastAPI, Header, HTTPException, Query, Response

from capsules import __version__
from capsules.config import FETCH_TIMEOUT, PROXY_PATH, PROXY_TOKEN, UPSTREAM_URL

log = logging.getLogger(__name__)

app = FastAPI(title="SpaceX Capsules Proxy", version=__version__)


# ---- Auth: caller must present the configured bearer token ----
def require_login(authorization: Optional[str] = Header(None)) -> None:
    if not PROXY_TOKEN:
        log.warning("Rejected request: CAPSULES_PROXY_TOKEN is not configured")
        raise HTTPException(status_code=401, detail="not_authenticated")
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not hmac.compare_digest(token.strip().encode(), PROXY_TOKEN.encode()):
        raise HTTPException(status_code=401, detail="not_authenticated")


@app.get("/health")
def health():
    return {
        "status": "ok",
        "upstream": UPSTREAM_URL,
        "auth_configured": PROXY_TOKEN is not None,
    }


@app.get(PROXY_PATH, dependencies=[Depends(require_login)])
def list_capsules(
    limit: Optional[int] = Query(None, ge=0),
    offset: Optional[int] = Query(None, ge=0),
):
    t0 = time.time()
    params = {k: v for k, v in {"limit": limit, "offset": offset}.items() if v is not None}
    try:
        resp = requests.get(UPSTREAM_URL, params=params, timeout=FETCH_TIMEOUT)
    except requests.RequestException as e:
        log.error("Upstream request failed: %s", e)
        raise HTTPException(status_code=502, detail=f"upstream_error: {e}")

    log.info(
        "Proxied %s params=%s -> %d (%.1f ms)",
        UPSTREAM_URL, params, resp.status_code, (time.time() - t0) * 1000,
    )
    # body passed through untouched
    return Response(content=resp.content, status_code=resp.status_code, media_type="application/json")

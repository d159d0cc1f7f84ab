# Data source + block contract
# UPSTREAM: https://api.spacexdata.com/v3/capsules (reached through the proxy)
# PROXY:    GET /spacex/v1/capsules?limit=<N>&offset=<M>
# RECORD FIELDS:
#   ['capsule_id','capsule_serial','type','original_launch','status',
#    'reuse_count','landings','details','missions']
#
# Block attributes (host attribute bag):
#   - capsules        (array)   : current view
#   - allcapsules     (array)   : full fetched page, source of truth for filtering
#   - totalPages      (number)  : items on the fetched page
#   - currentPage     (number)  : 1-based
#   - selectedCapsule (object)  : modal selection or null
#   - modalIsOpen     (boolean)

import os
from typing import Optional

PROXY_BASE_URL = os.getenv("CAPSULES_PROXY_URL", "http://localhost:8000").rstrip("/")
PROXY_PATH = "/spacex/v1/capsules"
PROXY_TOKEN = os.getenv("CAPSULES_PROXY_TOKEN", "").strip() or None

UPSTREAM_URL = os.getenv("SPACEX_CAPSULES_URL", "https://api.spacexdata.com/v3/capsules")


def _timeout() -> Optional[float]:
    raw = os.getenv("CAPSULES_FETCH_TIMEOUT", "").strip()
    return float(raw) if raw else None


FETCH_TIMEOUT = _timeout()

ITEMS_PER_PAGE = 10
PAGE_BUTTONS = 10

BLOCK_CLASS_NAME = "wp-block-cgb-block-capsules"

LOG_DIR = os.getenv("CAPSULES_LOG_DIR", "logs")

# backend/store/__main__.py
# SPDX-License-Identifier: Apache-2.0
#
# Run the inquiry store locally:
#
#   python -m backend.store                 # bind STORE_HOST:STORE_PORT
#   python -m backend.store --port 9000
#   STORE_MAINTENANCE=1 python -m backend.store   # admin RPCs answer 503

import argparse
import logging
import os

import uvicorn
from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from backend.store.api import create_app
from backend.store.config import StoreConfig

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(), format="%(asctime)s %(levelname)-8s: %(message)s"
)
log = logging.getLogger(__name__)
load_dotenv()


def main() -> None:
    cfg = StoreConfig.from_env()
    ap = argparse.ArgumentParser(description="Kiosk inquiry store (FastAPI)")
    ap.add_argument("--host", default=cfg.host)
    ap.add_argument("--port", type=int, default=cfg.port)
    args = ap.parse_args()

    app = create_app(cfg)
    log.info(
        "Inquiry store on %s:%d (db=%s, maintenance=%s)",
        args.host,
        args.port,
        make_url(cfg.database_url).render_as_string(hide_password=True),
        cfg.maintenance,
    )
    uvicorn.run(app, host=args.host, port=args.port, log_level=logging.getLevelName(log.getEffectiveLevel()).lower())


if __name__ == "__main__":
    main()

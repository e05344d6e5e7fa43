#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Yuletide gift list (SQLite + FastAPI)

Commands:
  init                Create the gifts table if absent and seed it when empty
  list                Print every gift as JSON, ordered by id
  serve               Run the HTTP API (uvicorn) on HOST/PORT

Notes:
- The database path comes from YULETIDE_DB_PATH, then config.yaml `db_path`,
  then ./yuletide.db next to this file. `--db` overrides all of them.
- PORT defaults to 3000.
"""

import argparse
import json
import logging
import sys

from yuletide.config import get_host, get_port
from yuletide.services.gift_svc import GiftStore, StoreError, bootstrap


def cmd_init(args):
    store = GiftStore(args.db)
    try:
        inserted = bootstrap(store)
    finally:
        store.close()
    if inserted:
        print(f"DB initialized and seeded with {inserted} gifts: {store.db_path}")
    else:
        print(f"DB already initialized: {store.db_path}")


def cmd_list(args):
    store = GiftStore(args.db)
    try:
        bootstrap(store)
        gifts = store.list_all()
    finally:
        store.close()
    print(json.dumps(gifts, ensure_ascii=False, indent=2))


def cmd_serve(args):
    import uvicorn

    from yuletide.api import create_app

    app = create_app(GiftStore(args.db))
    uvicorn.run(app, host=args.host or get_host(), port=args.port or get_port())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Yuletide gift list (SQLite + FastAPI)")
    parser.add_argument("--db", default=None, help="SQLite file path (overrides env/config)")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create schema and seed default gifts")
    p_init.set_defaults(func=cmd_init)

    p_list = sub.add_parser("list", help="print all gifts")
    p_list.set_defaults(func=cmd_list)

    p_serve = sub.add_parser("serve", help="run the HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except StoreError as e:
        print(f"[ERROR] storage failure: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

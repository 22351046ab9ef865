#!/usr/bin/env python3
"""
scripts/list_people.py — Dump the configured people collection as JSON.

Usage:
    python -m scripts.list_people            # all documents
    python -m scripts.list_people --count    # number of documents only
    python -m scripts.list_people --ping     # connectivity check only
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from core.config import LOG_LEVEL
from core.database import DatabaseConnectionError, close_connection, get_connection
from core.people_repository import get_all_people

logger = logging.getLogger("list_people")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print every document in the people collection.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--count", action="store_true", help="print only the number of documents")
    group.add_argument("--ping", action="store_true", help="only check that MongoDB is reachable")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.ping:
        try:
            conn = get_connection()
            conn.get_db()
            ok = conn.is_connected()
        except DatabaseConnectionError as exc:
            logger.error("%s: %s", exc, exc.__cause__)
            ok = False
        finally:
            close_connection()
        print("ok" if ok else "unreachable")
        return 0 if ok else 1

    try:
        people = get_all_people()
    except DatabaseConnectionError as exc:
        logger.error("%s: %s", exc, exc.__cause__)
        return 1
    finally:
        close_connection()

    if args.count:
        print(len(people))
    else:
        print(json.dumps(people, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())

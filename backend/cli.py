"""
pgscope command line.

    pgscope exec    <conn> <sql>     run SQL, print rows as a JSON array
    pgscope preview <conn> <table>   first rows of a table
    pgscope <other> <conn>           dump the public schema graph

Success prints pretty JSON to stdout. Any failure prints {"error": ...} on
one line to stdout and exits with status 1.
"""
import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from config import settings
from core.db_connector import reflect_schema
from core.query_runner import execute, preview
from models.connection import ConnectionRequest

logger = logging.getLogger("pgscope")

USAGE = "Usage: pgscope <mode> <conn> [args...]"


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ValueError(f"{USAGE} ({message})")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="pgscope", usage=USAGE, add_help=False, description="Schema graph and ad-hoc SQL as JSON.")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL (logs go to stderr)")
    parser.add_argument("mode", nargs="?")
    parser.add_argument("conn", nargs="?")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def dispatch(mode: str, conn: Optional[str], args: Sequence[str]) -> Any:
    if not conn:
        raise ValueError("Missing connection string")
    req = ConnectionRequest(dsn=conn)

    if mode == "exec":
        if not args:
            raise ValueError("Missing SQL query")
        return execute(req, args[0])

    if mode == "preview":
        if not args:
            raise ValueError("Missing table name")
        return preview(req, args[0])

    return reflect_schema(req).model_dump(mode="json")


def run(argv: Optional[Sequence[str]] = None) -> None:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, (ns.log_level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )
    if not ns.mode:
        raise ValueError(USAGE)

    payload = dispatch(ns.mode, ns.conn, ns.args)
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        run(argv)
    except Exception as e:
        logger.debug("pgscope failed", exc_info=True)
        print(json.dumps({"error": str(e)}))
        sys.exit(1)


if __name__ == "__main__":
    main()

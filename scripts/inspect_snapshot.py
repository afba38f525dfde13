#!/usr/bin/env python3
"""Inspect a saved brain snapshot.

Loads a JSON snapshot (as written by a persistence adapter) into a fresh
brain and runs lookups against it.  Read-only: nothing is written back.

Usage
-----
    python scripts/inspect_snapshot.py brain.json
    python scripts/inspect_snapshot.py brain.json --key greeting
    python scripts/inspect_snapshot.py brain.json --user alice
    python scripts/inspect_snapshot.py brain.json --fuzzy al
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from botbrain import Brain, BrainSnapshotError, EventEmitter, User, load_snapshot

MAX_VAL_WIDTH = 60


def _truncate(val: Any, width: int = MAX_VAL_WIDTH) -> str:
    s = str(val)
    if len(s) <= width:
        return s
    return s[: width - 3] + "..."


def _print_users(users: list[User]) -> None:
    if not users:
        print("No matching users.")
        return
    for user in users:
        extras = user.model_extra or {}
        extra_text = f"  {_truncate(json.dumps(extras, default=str))}" if extras else ""
        print(f"{user.id!s:<12}  {user.name or '-':<20}  {user.room or '-':<16}{extra_text}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect a saved brain snapshot.")
    parser.add_argument("snapshot", help="JSON snapshot file")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--key", help="Print one value from the private namespace")
    group.add_argument("--user", help="Exact (case-insensitive) user name lookup")
    group.add_argument("--fuzzy", help="Prefix user name lookup")
    args = parser.parse_args()

    try:
        data = load_snapshot(Path(args.snapshot).read_bytes())
    except BrainSnapshotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    brain = Brain(EventEmitter())
    brain.merge_data(data)

    if args.key is not None:
        print(_truncate(brain.get(args.key)))
    elif args.user is not None:
        user = brain.user_for_name(args.user)
        _print_users([user] if user is not None else [])
    elif args.fuzzy is not None:
        _print_users(brain.users_for_fuzzy_name(args.fuzzy))
    else:
        print(f"Users:       {len(brain.users())}")
        print(f"Private keys: {len(brain.data.private)}")
        for key in sorted(brain.data.private):
            print(f"  {key:<24}  {_truncate(brain.data.private[key])}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

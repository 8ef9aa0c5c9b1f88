"""Entry point: python -m savable [demo|show <id>]

- "demo":      Save a sample Person and Business, print them reloaded
- "show <id>": Print the stored document for an id
"""

from __future__ import annotations

import logging
import sys

from savable.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_demo() -> None:
    config = load_config()
    _setup_logging(config.log_level)

    from savable.demo import run_demo
    from savable.store import EntityStore

    for entity in run_demo(EntityStore(config)):
        print(entity.id, entity)


def _run_show(raw_id: str) -> None:
    config = load_config()
    _setup_logging(config.log_level)

    from savable.sequence import FileIdHolder
    from savable.store import EntityStore

    store = EntityStore(config)
    path = store.path_for(int(raw_id))
    if not path.exists():
        last = FileIdHolder(config.seq_path, config.seq_step).last_id()
        print(f"No entity with id {raw_id} (last issued id: {last})", file=sys.stderr)
        sys.exit(1)
    print(path.read_text(encoding="utf-8"))


def _usage() -> None:
    print("Usage: python -m savable [demo|show <id>]")
    print("  demo       Save and reload sample entities")
    print("  show <id>  Print the stored document for an id")
    sys.exit(1)


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "demo"

    if cmd == "demo":
        _run_demo()
    elif cmd == "show" and len(sys.argv) > 2 and sys.argv[2].isdigit():
        _run_show(sys.argv[2])
    else:
        _usage()


if __name__ == "__main__":
    main()

# scripts/smoke.py
"""
Smoke Test Script for chronoline.

Usage
-----
1. Build the bundled samples:
    $ python scripts/smoke.py

2. Build a specific document:
    $ python scripts/smoke.py --file samples/works.json
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from chronoline.core.errors import TimelineError
from chronoline.documents import load_document

load_dotenv(Path(".env"))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

SAMPLES = [Path("samples/events.json"), Path("samples/works.json")]


def _run(path: Path) -> bool:
    """Build one document and print what came out."""
    print(f"\n📂 {path}")
    try:
        timeline = load_document(path).build()
    except TimelineError as exc:
        print(f"❌ {type(exc).__name__}: {exc}")
        traceback.print_exc()
        return False

    print(f"✅ {len(timeline)} events, years {timeline.first_year()}-{timeline.last_year()}")
    for event in timeline:
        print(f"  - {event.start} .. {event.end or '(duration)'}  {event.title}")
    return True


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run chronoline Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a JSON timeline document")
    args = parser.parse_args()

    paths = [Path(args.file)] if args.file else SAMPLES
    missing = [p for p in paths if not p.exists()]
    if missing:
        print(f"❌ File not found: {missing[0]}")
        sys.exit(1)

    ok = all([_run(p) for p in paths])
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

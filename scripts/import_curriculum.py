"""
Import a curriculum directory tree.

Writes tracks.jsonl / missions.jsonl to the output directory, copies
referenced resources into the store, prints one line per imported mission
and reports every diagnostic on stderr.

Usage:
    python scripts/import_curriculum.py curriculum/ --store static/resources
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import curriculum_importer
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from curriculum_importer.importer import ImportConfig, JsonlRepository, import_tracks


def main() -> int:
    parser = argparse.ArgumentParser(description="Import curriculum tracks and missions")
    parser.add_argument("root", type=Path, help="Directory containing track directories")
    parser.add_argument("--store", type=Path, default=Path("static/resources"),
                        help="Resource store directory")
    parser.add_argument("--public-path", default="/static/resources",
                        help="URL prefix the store is served under")
    parser.add_argument("--output", "-o", type=Path, default=Path("import_output"),
                        help="Directory for tracks.jsonl and missions.jsonl")
    parser.add_argument("--report", type=Path, help="Write a JSON diagnostics report here")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    # Diagnostics are printed below, so library logging stays quiet unless verbose
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.CRITICAL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ImportConfig(store_root=args.store, public_path=args.public_path)
    repository = JsonlRepository(args.output)

    try:
        result = import_tracks(args.root, repository, config=config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for issue in result.diagnostics.issues:
        print(issue, file=sys.stderr)
    for summary in result.summaries:
        print(summary)

    if args.report:
        result.diagnostics.generate_report().save(args.report)

    print(
        f"\nImported {len(result.tracks)} tracks, {result.mission_count} missions "
        f"({result.diagnostics.issue_count} issues)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

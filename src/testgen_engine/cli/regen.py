"""Regeneration CLI command."""

import argparse


def cmd_regen(args: argparse.Namespace) -> int:
    from testgen_engine.fixtures.loader import FixtureLoader
    from testgen_engine.regen.sync import sync_file

    loader = FixtureLoader(root=args.fixtures_root, meta=args.meta)
    dry_run = args.dry_run or args.check
    result = sync_file(args.file, loader, dry_run=dry_run)

    prefix = "[DRY RUN] " if result["dry_run"] else ""
    print(f"  {prefix}{result['path']}: {result['action']}")
    print(f"  {'─' * 40}")
    for region in result["regions"]:
        print(f"  {region.module:<40} {len(region.tests):>4} test(s)  (line {region.line})")
    total = sum(len(r.tests) for r in result["regions"])
    print(f"\n  {len(result['regions'])} region(s), {total} test(s)")
    if not result["dry_run"]:
        print(f"  Original saved as {result['backup']}")

    if args.check and result["action"] != "unchanged":
        print("\n  File is out of date; rerun without --check.")
        return 1
    return 0

#!/usr/bin/env python3
"""CLI script to push campaign data to the API, the way automation tools do."""
import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from campaign_api.client import CampaignClient


def _read_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def push_document(client: CampaignClient, path: str) -> None:
    """Replace all campaign data with the contents of a file."""
    result = await client.push_document(_read_json(path))
    print(f"✓ {result['message']} ({result['reports']} reports)")


async def push_report(client: CampaignClient, report_id: str, path: str) -> None:
    """Insert or replace one report."""
    result = await client.push_report(report_id, _read_json(path))
    print(f"✓ {result['message']} [{result['outcome']}]")


async def refresh(client: CampaignClient) -> None:
    result = await client.refresh()
    print(f"✓ {result['message']} ({result['reports']} reports)")


async def health(client: CampaignClient) -> None:
    result = await client.health()
    cache = result["cache"]
    age = f"{cache['age']} ms" if cache["age"] is not None else "-"
    print(f"Status: {result['status']}")
    print(f"Uptime: {result['uptime']:.0f}s")
    print(f"Cache:  {'warm' if cache['exists'] else 'empty'} (age {age})")


async def show(client: CampaignClient, report_id: str | None) -> None:
    """Print the whole document, or a single report."""
    if report_id:
        report = await client.get_report(report_id)
        if report is None:
            print(f"Report not found: {report_id}")
            return
        print(json.dumps(report, indent=2, ensure_ascii=False))
        return

    document = await client.get_campaigns()
    print(f"{len(document['reports'])} reports")
    for report in document["reports"]:
        report_id = report.get("id", "?") if isinstance(report, dict) else "?"
        print(f"  {report_id}")


def main():
    parser = argparse.ArgumentParser(
        description="Push campaign reports to the Campaign Architecture API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replace all campaign data
  python push_campaigns.py push data/export.json

  # Insert or replace one report
  python push_campaigns.py push-report q3-search report.json

  # Reload the server cache from disk
  python push_campaigns.py refresh

  # Show stored reports
  python push_campaigns.py show
  python push_campaigns.py show --report q3-search
"""
    )
    parser.add_argument("--url", help="API base URL (default: CAMPAIGN_API_URL)")
    sub = parser.add_subparsers(dest="command")

    push_parser = sub.add_parser("push", help="Replace all campaign data")
    push_parser.add_argument("file", help="JSON file with { reports: [...] }")

    report_parser = sub.add_parser("push-report", help="Insert or replace one report")
    report_parser.add_argument("report_id", help="Report ID")
    report_parser.add_argument("file", help="JSON file with the report")

    sub.add_parser("refresh", help="Reload the server cache")
    sub.add_parser("health", help="Show server health")

    show_parser = sub.add_parser("show", help="Show stored reports")
    show_parser.add_argument("--report", help="Show a single report by ID")

    args = parser.parse_args()
    client = CampaignClient(base_url=args.url)

    if args.command == "push":
        asyncio.run(push_document(client, args.file))
    elif args.command == "push-report":
        asyncio.run(push_report(client, args.report_id, args.file))
    elif args.command == "refresh":
        asyncio.run(refresh(client))
    elif args.command == "health":
        asyncio.run(health(client))
    elif args.command == "show":
        asyncio.run(show(client, args.report))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

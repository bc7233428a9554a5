"""Lightweight REST client for the pokerstats API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pokerstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--year", type=int, default=None, help="Restrict results to one year")
    parser.add_argument("--years", action="store_true", help="List years with recorded sessions and exit")
    parser.add_argument("--series", action="store_true", help="Fetch cumulative series instead of stats")
    parser.add_argument("--hold", action="store_true", help="Carry cumulative values across skipped dates")
    parser.add_argument("--review", metavar="PLAYER_SLUG", help="Fetch a player's year in review")
    args = parser.parse_args()

    params = {"year": args.year} if args.year is not None else {}

    with httpx.Client(base_url=args.base_url) as client:
        if args.years:
            resp = client.get("/years")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.review:
            resp = client.get(f"/players/{args.review}/review", params=params)
            if resp.status_code == 404:
                raise SystemExit(f"player {args.review} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.series:
            resp = client.get("/series", params={**params, "hold": args.hold})
            resp.raise_for_status()
            payload = resp.json()
            print(f"{len(payload['series'])} players across {len(payload['domain'])} dates")
            print(json.dumps(payload["series"], indent=2))
            return

        resp = client.get("/stats", params=params)
        if resp.status_code == 502:
            raise SystemExit(resp.json().get("detail", "sheet fetch failed"))
        resp.raise_for_status()
        payload = resp.json()
        print(f"Received stats for {payload['players']} players over {payload['sessions']} sessions")
        for stat in payload["stats"]:
            print(f"{stat['player']}: {stat['total_winnings']:.2f} ({stat['sessions']} sessions)")


if __name__ == "__main__":
    main()

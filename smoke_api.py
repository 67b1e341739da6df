#!/usr/bin/env python3
"""
Manual smoke check against a running Line Change Timer server.

Loads a roster, starts the game, puts the first player on, polls the state
and pauses again, printing each response. Run ``python run_web.py`` first.
"""
import sys
import time

import requests

DEFAULT_BASE_URL = "http://127.0.0.1:7122"


def run_smoke(base_url: str = DEFAULT_BASE_URL, session=None, wait_seconds: float = 1.0) -> bool:
    """
    Walk through the main game flow and report whether every call succeeded.

    Args:
        base_url: Server root URL
        session: Optional requests.Session (or compatible) to send requests with
        wait_seconds: Time to let the clock run before polling

    Returns:
        True if every endpoint answered with ``success: true``
    """
    http = session or requests.Session()
    ok = True

    def call(method: str, path: str, **kwargs) -> dict:
        nonlocal ok
        response = http.request(method, f"{base_url}{path}", timeout=5, **kwargs)
        print(f"{method} {path} -> {response.status_code}")
        data = response.json()
        if not data.get("success"):
            print(f"   Error: {data.get('error')}")
            ok = False
        return data

    print("Testing line change workflow...")
    roster = call("POST", "/api/roster", json={"names": "Smoke A, Smoke B, Smoke C"})
    call("POST", "/api/timer/start")
    players = roster.get("players") or []
    if players:
        call("POST", f"/api/players/{players[0]['id']}/toggle")

    time.sleep(wait_seconds)
    state = call("GET", "/api/state")
    for standing in state.get("standings", []):
        print(f"   #{standing['place']} {standing['name']}: {standing['total_display']}")

    call("POST", "/api/timer/pause")
    return ok


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    try:
        passed = run_smoke(url)
    except requests.RequestException as e:
        print(f"Server not reachable at {url}: {e}")
        sys.exit(2)
    sys.exit(0 if passed else 1)

import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:3000")
ROOT = BASE_URL.rstrip('/')
API = f"{ROOT}/api"

def get(url: str, params=None):
    r = requests.get(url, params=params, timeout=30)
    r.raise_for_status()
    return r

def main():
    print(f"[smoke] Target: {ROOT}")
    print("[smoke] /api/health/live:", get(f"{API}/health/live").status_code)
    print("[smoke] /version:", get(f"{ROOT}/version").status_code)

    try:
        r = get(f"{API}/search", {"year": os.environ.get("SMOKE_YEAR", "2024")})
        print("[smoke] /api/search:", r.status_code, json.dumps(r.json(), indent=2, ensure_ascii=False)[:300])
    except requests.HTTPError as he:
        if he.response is not None and he.response.status_code == 502:
            print("[smoke] /api/search upstream unavailable (502)")
        else:
            raise

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)

"""Run the study plan API locally.

Usage:
    python scripts/run_server.py
    python scripts/run_server.py --port 8080 --reload
"""

import argparse

import uvicorn


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the study plan API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    uvicorn.run("study_planner.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()

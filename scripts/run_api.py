from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn


def _ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the tic-tac-toe game API.")
    parser.add_argument("--host", default=None, help="Overrides APP_HOST.")
    parser.add_argument("--port", type=int, default=None, help="Overrides APP_PORT.")
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    _ensure_src_on_path()
    from api.config import get_settings

    args = _parse_args()
    settings = get_settings()
    uvicorn.run(
        "api.app:app",
        host=args.host or settings.app_host,
        port=args.port or settings.app_port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()

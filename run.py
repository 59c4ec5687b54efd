import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from spaserve.config import LOG_LEVELS, load_config
from spaserve.errors import BindError, StartupError
from spaserve.server import serve


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(Path.cwd() / ".env")

    parser = argparse.ArgumentParser(description="Serve a built single-page web app")
    parser.add_argument("--host", default=None, help="bind address (env HOST, default 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="port (env APP_PORT, default 3000)")
    parser.add_argument("--root", default=None, help="static root (env STATIC_ROOT, default build/web)")
    parser.add_argument(
        "--fallback",
        default=None,
        help="document served for unmatched paths (env FALLBACK_DOCUMENT, default <root>/index.html)",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    args = parser.parse_args(argv)

    try:
        config = load_config(
            host=args.host,
            port=args.port,
            static_root=args.root,
            fallback=args.fallback,
            log_level=args.log_level,
        )
        serve(config)
    except (StartupError, BindError) as e:
        print(f"Cannot start server: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

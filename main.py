"""
Scripture Content Studio - main entry point.

Runs the content CLI, or the local API server with `serve`.

    python main.py run --prompt "Davi e Golias" --chars 1500
    python main.py serve --port 8000
"""

import os
import sys

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()


def serve(argv) -> int:
    import argparse
    import uvicorn
    from src.infra.data_paths import ensure_data_directories
    from src.infra.logging_config import setup_logging

    parser = argparse.ArgumentParser(description="Run the local API server")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    ensure_data_directories()
    setup_logging(os.getenv("LOG_LEVEL", "INFO").upper())
    uvicorn.run("src.api.main:app", host=args.host, port=args.port)
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "serve":
        return serve(argv[1:])

    from src.content.cli import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())

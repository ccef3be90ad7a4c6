#!/usr/bin/env python3
"""
Entry point for the todo contracts project.
Supports several launch modes.
"""

import sys
import logging
import subprocess
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from todo_contracts.demo import run_demo
from todo_contracts.logging_utils import configure_logging
from todo_contracts.settings import get_settings

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


def run_server():
    """Run the FastAPI app with uvicorn."""
    import uvicorn

    settings = get_settings()
    logger.info(
        "Starting on 0.0.0.0:%s (STORE_CONTRACT_STYLE=%s, STORE_DUPLICATE_POLICY=%s)",
        settings.port,
        settings.contract_style,
        settings.duplicate_policy.value,
    )
    uvicorn.run(
        "todo_contracts.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def run_tests():
    """Run the test suite."""
    logger.info("Running tests...")
    result = subprocess.run(["pytest", "tests/", "-v"], cwd=Path(__file__).parent)
    sys.exit(result.returncode)


def show_help():
    print("""
Todo Contracts - Launch Utility

Usage:
  python run.py [command]

Commands:
  demo       - Walk through both contract styles on the console
  serve      - Run the HTTP API
  test       - Run tests
  help       - Show this help message
    """.strip())


def main():
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "demo"

    try:
        if mode == "demo":
            run_demo()
        elif mode == "serve":
            run_server()
        elif mode == "test":
            run_tests()
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

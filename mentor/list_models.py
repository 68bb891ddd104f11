"""List the Gemini models an API key can generate content with.

Usage:
    GEMINI_API_KEY=... python -m mentor.list_models
    python -m mentor.list_models --api-key ...
"""

import argparse
import logging
import os
import sys

import httpx

from .config import load_resolver_config
from .providers.gemini import GeminiBackend

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--api-key", default=os.environ.get("GEMINI_API_KEY"))
    args = parser.parse_args(argv)

    if not args.api_key:
        logger.error("No API key: pass --api-key or set GEMINI_API_KEY")
        return 2

    config = load_resolver_config()
    backend = GeminiBackend(api_base=config.gemini_api_base, timeout=config.timeout_seconds)
    try:
        models = backend.list_models(args.api_key)
    except httpx.HTTPError as exc:
        logger.error("Could not list models: %s", exc)
        return 1

    print("Available models:")
    for model in models:
        print(f"- {model.get('name')} ({model.get('displayName', '')})")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(main())

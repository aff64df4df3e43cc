"""Process entry point — ``python -m shelf_api``.

Exits with status 1 before binding a port when DATABASE_URL is missing.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from shelf_api.config import get_settings

logger = logging.getLogger("shelf_api")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        missing = ", ".join(
            str(err["loc"][0]).upper() for err in e.errors()
        )
        logger.error(f"Invalid configuration ({missing}); is DATABASE_URL set?")
        return 1
    uvicorn.run(
        "shelf_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Run the API server: python -m placement_portal"""

import uvicorn

from placement_portal.core.config import get_settings
from placement_portal.core.logging import configure_logging


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "placement_portal.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()

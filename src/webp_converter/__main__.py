"""Run the service with uvicorn: ``python -m webp_converter``."""

import uvicorn
from loguru import logger

from .app import create_app
from .config import get_settings
from .utils.log_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

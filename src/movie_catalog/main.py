import logging
import uvicorn

from movie_catalog import create_app
from movie_catalog.common.utils.logging_config import setup_logging
from movie_catalog.config import settings

setup_logging(
    app_name="movie_catalog",
    log_level=settings.LOG_LEVEL,
    log_to_file=settings.LOG_TO_FILE,
    log_dir=settings.LOG_DIR,
)
logger = logging.getLogger(__name__)

app = create_app()


def run():
    logger.info(f"server running on port {settings.SERVER_PORT}")
    uvicorn.run(
        "movie_catalog.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run()

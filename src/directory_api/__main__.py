"""Run the API server: ``python -m directory_api``."""

import uvicorn

from directory_api.config import settings
from directory_api.init_db import init_database


def main() -> None:
    init_database()
    uvicorn.run(
        "directory_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Run the API with ``python -m users_api``."""

import uvicorn

from users_api.config import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        "users_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

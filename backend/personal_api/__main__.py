"""Run the API with uvicorn: `python -m personal_api`."""

import uvicorn

from personal_api.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "personal_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

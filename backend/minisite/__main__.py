"""Run the site with uvicorn: python -m minisite"""

import uvicorn

from minisite.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None: keep the JSON logging set up in the app lifespan
    uvicorn.run(
        "minisite.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()

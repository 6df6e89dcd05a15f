"""Run the API with uvicorn on the configured host and port."""

import uvicorn

from product_api.core.config import get_settings
from product_api.core.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

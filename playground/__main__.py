"""Run the playground with uvicorn: python -m playground."""

import uvicorn

from playground.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "playground.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()

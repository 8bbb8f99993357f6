"""Run the Battlemap API with uvicorn: ``python -m battlemap``."""

import uvicorn

from battlemap.config import settings


def main() -> None:
    uvicorn.run(
        "battlemap.app:create_asgi_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()

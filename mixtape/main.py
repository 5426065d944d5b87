"""Entry: start the mixtape API server."""
import uvicorn

from mixtape.config import API_HOST, API_PORT


def main() -> None:
    uvicorn.run(
        "mixtape.api.fastapi_app:app",
        host=API_HOST,
        port=API_PORT,
    )


if __name__ == "__main__":
    main()

import uvicorn

from notes_api.config import load_settings
from notes_api.main import create_app, setup_logging


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

"""Run the Campus API with uvicorn: python -m campus_api"""

from uvicorn import Config, Server

from campus_api.config import get_settings
from campus_api.main import create_app


def main() -> None:
    settings = get_settings()
    config = Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=int(settings.read_timeout_seconds),
        timeout_graceful_shutdown=int(settings.write_timeout_seconds),
        log_config=None,
        access_log=False,
    )
    Server(config).run()


if __name__ == "__main__":
    main()

import uvicorn

from ytproxy.main import build_app


def main() -> None:
    app = build_app()
    config = app.state.config
    uvicorn.run(
        app,
        host=config.api.host,
        port=config.api.port,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()

import uvicorn

from pinning_relay.common.config import settings


def main() -> None:
    uvicorn.run("pinning_relay.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

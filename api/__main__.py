"""Run the API with uvicorn: ``python -m api``."""

import uvicorn

from api.config import ServerConfig, configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run("api.main:app", host="0.0.0.0", port=ServerConfig.get_port())


if __name__ == "__main__":
    main()

"""Run the API with uvicorn on the configured host and port.

Usage:
    python -m mentors_api.serve
"""
import uvicorn

from mentors_api.core import config


def main() -> None:
    uvicorn.run(
        'mentors_api.main:app',
        host=config.settings.host,
        port=config.settings.port,
        log_level=config.settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

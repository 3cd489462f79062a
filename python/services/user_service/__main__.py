"""Run the user service with uvicorn.

Usage::

    SERVER_PORT=8080 python -m user_service
"""

import uvicorn

from user_service.app import create_app
from user_service.config import load_settings
from user_service.logging_config import setup_logging


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    base_url = f"http://localhost:{settings.port}"
    print(f"User service started: {base_url}")
    print(f"Try: curl {base_url}/hello")
    print(f"Try: curl {base_url}/health")
    print(f"Try: curl {base_url}/users")
    print(
        f"Try: curl -X POST -H 'Content-Type: application/json' "
        f"-d '{{\"name\":\"Alice\",\"email\":\"alice@example.com\"}}' {base_url}/users"
    )

    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

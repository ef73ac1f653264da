"""
Run the backend with uvicorn:

    python -m wedding_planner
    wedding-planner
"""

import uvicorn

from wedding_planner.config import settings


def main() -> None:
    uvicorn.run(
        "wedding_planner.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

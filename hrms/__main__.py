"""Run the API with uvicorn: ``python -m hrms``."""
import uvicorn

from hrms.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("hrms.main:app", host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    main()

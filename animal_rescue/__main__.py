"""Run the backend with Uvicorn.

Usage:
    python -m animal_rescue
"""
import uvicorn

from .config import HOST, PORT


def main() -> None:
    """Serve the FastAPI app on RESCUE_HOST:RESCUE_PORT."""
    uvicorn.run("animal_rescue.main:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()

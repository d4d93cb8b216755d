"""Run the WellMap proxy.

Usage:
    python server.py
    uvicorn wellmap.server:app --reload   # equivalent, with auto-reload
"""

import uvicorn
from dotenv import load_dotenv

from wellmap.config import settings
from wellmap.utils.log import setup_logging


def main():
    """Main entry point."""
    load_dotenv()
    setup_logging(settings.log_level)
    uvicorn.run("wellmap.server:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

"""Campaign Store launcher. Starts the API server with uvicorn."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "3000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def main():
    parser = argparse.ArgumentParser(description="Campaign Store API server")
    parser.add_argument("--data-file", type=Path, default=None,
                        help="JSON document to serve (default: ./data/campaign.json)")
    parser.add_argument("--port", type=int, default=int(PORT))
    parser.add_argument("--reload", action="store_true",
                        help="Restart on code changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # The app module reads DATA_FILE when it builds its default instance
    if args.data_file:
        os.environ["DATA_FILE"] = str(args.data_file.resolve())

    print(f"Starting campaign store on http://localhost:{args.port} ...")
    uvicorn.run("campaign_store.app:app", host=HOST, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()

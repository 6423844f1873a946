import logging
import sys
import uvicorn

import argparse

import config

if __name__ == "__main__":

    parser = argparse.ArgumentParser(description="Start the Ratings API with optional host and port.")

    parser.add_argument("--host", type=str, default=config.HOST, help="Host address to bind to")

    parser.add_argument("--port", type=int, default=config.PORT, help="Port number to bind to")

    parser.add_argument("--reload", action="store_true", help="Restart the server on code changes")

    args = parser.parse_args()

    if not config.MONGO_URI:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger("start-app").error("❌ MONGO_URI is not set, refusing to start.")
        sys.exit(1)

    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.reload)

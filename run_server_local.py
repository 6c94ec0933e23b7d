"""
Special function for running API endpoint server locally whenever required.

Simply run python run_server_local.py in the terminal to launch the server
and begin hosting the swagger UI at `http://0.0.0.0:3001/docs`.
The port can be changed with the PORT environment variable.
"""
import os
import signal
import sys

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def main():
    port = int(os.getenv("PORT", "3001"))

    # Use Uvicorn programmatically for proper cleanup on Ctrl+C
    config = uvicorn.Config(
        "api.server:app",
        host="0.0.0.0",
        port=port,
        reload=True
    )
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        print("\nShutting down gracefully...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    print(f"Health check: http://localhost:{port}/api/health")
    server.run()
    print("Server stopped cleanly.")

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received. Exiting...")
        sys.exit(0)

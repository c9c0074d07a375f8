#!/usr/bin/env python3
"""
A simple script to run the receipt points service.
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

if __name__ == "__main__":
    from app import create_app
    from config.settings import ServiceConfig

    config = ServiceConfig()
    app = create_app(config)

    print(f"Starting receipt points service on http://{config.host}:{config.port}")
    print("Press Ctrl+C to stop the server")

    app.run(debug=config.debug, port=config.port, host=config.host, threaded=True)

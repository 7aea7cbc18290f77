#!/usr/bin/env python3
"""
Bank Account Service Entry Point

Starts the FastAPI server exposing the in-memory account.
"""

import sys

from bank_account.api import run_server
from bank_account.config import get_config


if __name__ == "__main__":
    config = get_config()
    print("🏦 Starting Bank Account Service...")
    print(f"🌐 API available at: http://localhost:{config.api_port}")
    print(f"📚 Documentation at: http://localhost:{config.api_port}/docs")
    print()
    
    try:
        run_server(
            host=config.api_host,
            port=config.api_port,
            debug=False
        )
    except KeyboardInterrupt:
        print("\n👋 Shutting down Bank Account Service...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)

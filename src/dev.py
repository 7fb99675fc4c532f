"""
Development entry point with hot reloading.
This file runs the application in development mode with auto-reload.
"""

import uvicorn
import sys
import os

def main():
    """
    Main function to run the FastAPI application in development mode.
    """
    # Add the src directory to Python path so the package imports without installation
    src_dir = os.path.dirname(os.path.abspath(__file__))
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)
    
    uvicorn.run(
        "passgauge.app:app",
        host="127.0.0.1",         # Localhost only for development
        port=8000,                # Default port
        reload=True,              # Enable auto-reload on code changes
        reload_dirs=[src_dir],    # Watch the src directory
        log_level="debug"         # More verbose logging for development
    )

if __name__ == "__main__":
    main()

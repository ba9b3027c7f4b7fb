"""
Entry point for running the FrameFlow media host as a module.
"""

from .main import main

if __name__ == "__main__":
    main()

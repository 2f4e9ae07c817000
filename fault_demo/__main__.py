"""
Entry point for running fault_demo as a module.

Usage:
    python -m fault_demo
    python -m fault_demo --category runtime
    python -m fault_demo --list
"""

from .cli import main

if __name__ == "__main__":
    main()

# main.py

"""Command line launcher for the hide tool.

Usage:
    python main.py -i document.json --add-keys password,token
"""

from hide.cli import run

if __name__ == "__main__":
    run()

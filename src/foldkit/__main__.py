"""
foldkit package entry point.

Allows running foldkit as a module:
    python -m foldkit
"""

from foldkit.cli import main

if __name__ == "__main__":
    main()

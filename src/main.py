"""Application entry point.

Kept as a tiny shim so `python src/main.py` continues to work for newcomers.
The actual implementation lives in the installable package.
"""

from greeter.cli import main


if __name__ == "__main__":
    main()

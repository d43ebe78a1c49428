"""Allow running the scanner as `python -m html_scanner`."""

from .cli import run

if __name__ == "__main__":
    run(prog="python -m html_scanner")

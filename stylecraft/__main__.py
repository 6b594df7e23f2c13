"""Entry point for `python -m stylecraft`."""

import sys


def main():
    from stylecraft.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()

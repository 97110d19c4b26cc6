"""Entry point for `python -m ccstatusline`."""

import sys


def main():
    from ccstatusline.app import run
    sys.exit(run())


if __name__ == "__main__":
    main()

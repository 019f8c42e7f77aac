"""Entry point for Source Mirror.

Usage:
    source-mirror <API URL>
    python -m source_mirror <API URL>

The current working directory is the folder that gets mirrored.
"""

import sys

USAGE = "Usage: source-mirror <API URL>"


def main(argv: list[str] | None = None) -> int:
    """Parse the endpoint argument and run the mirror."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        return 1

    from source_mirror.app import App, setup_logging
    from source_mirror.config import Config

    config = Config(api_url=args[0])
    setup_logging(config)
    return App(config).run()


if __name__ == "__main__":
    sys.exit(main())

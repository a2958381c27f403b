"""Allow ``python -m roadnet``."""

from roadnet.cli import main

if __name__ == "__main__":
    main()

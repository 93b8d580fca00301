"""Allow ``python -m designtocode``."""

from designtocode.cli import main

if __name__ == "__main__":
    main()

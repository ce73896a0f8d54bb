"""Allow running the CLI with ``python -m checked_calculator``."""

from checked_calculator.interfaces.cli import main

if __name__ == "__main__":
    main()

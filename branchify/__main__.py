"""Module entrypoint for ``python -m branchify``."""

from branchify.cli import main

if __name__ == "__main__":
    main()

"""Module entrypoint for `python -m catalog_validator`.

Delegates to the CLI implementation.
"""

from .cli.run_validate import main


if __name__ == "__main__":
    main()

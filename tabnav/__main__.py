"""Entrypoint for `python -m tabnav`."""

from tabnav.cli import main


if __name__ == "__main__":
    main()

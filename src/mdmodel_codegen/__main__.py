"""Module entry point for `python -m mdmodel_codegen`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""``python -m crumbs`` — same as the ``crumbs`` command."""

from crumbs.cli import main

if __name__ == "__main__":
    main()

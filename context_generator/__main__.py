"""Module entrypoint for ``python -m context_generator``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and scan setup happen in ``context_generator.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

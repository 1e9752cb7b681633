"""Module entrypoint for `python -m schema_typegen.inspector`.

Delegates to the inspector CLI implementation.
"""

from .run_inspect import main


if __name__ == "__main__":
    main()

"""Allow running the package with ``python -m tspgraph``."""

from tspgraph.cli import main

if __name__ == "__main__":
    main()

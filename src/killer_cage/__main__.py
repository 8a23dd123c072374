"""Main entry point for the killer_cage package."""
from killer_cage.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

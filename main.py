"""Entrypoint to print the scheduled TODOs of the configured org directory."""
import sys

from org_reminder.cli import main

if __name__ == "__main__":
    sys.exit(main())

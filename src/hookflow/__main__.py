"""Entry point for 'python -m hookflow' command.

This module allows the HookFlow CLI to be invoked using
'python -m hookflow'.
"""

from hookflow.cli import main

if __name__ == "__main__":
    main()

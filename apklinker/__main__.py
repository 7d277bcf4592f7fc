"""Entry point for CLI.

Only for calling via `python -m apklinker`, normally compiler calls `apk-linker` directly.
"""

from apklinker.cli.entry_point import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()

"""Command-line interface for relsum."""

from relsum.cli.parser import CLIParser
from relsum.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]

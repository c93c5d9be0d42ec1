"""
Interactive selection between several matching files.

A single prompt is shown; an invalid answer ends the interaction with
InvalidChoiceError rather than asking again.
"""

from typing import List, Sequence

import click

from ..errors import InvalidChoiceError
from ..models.workspace import FileMatch


def format_choices(matches: Sequence[FileMatch]) -> List[str]:
    """Numbered 'N. repo: path' lines, starting at 1."""
    return [f"{i}. {match.label()}" for i, match in enumerate(matches, start=1)]


def parse_choice(raw: str, count: int) -> int:
    """Convert a 1-based answer to a zero-based index, raising InvalidChoiceError if out of range."""
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidChoiceError(f"Invalid choice: {raw!r} is not a number") from None
    
    if choice < 1 or choice > count:
        raise InvalidChoiceError(f"Invalid choice: {choice} is not between 1 and {count}")
    
    return choice - 1


def choose_match(matches: Sequence[FileMatch]) -> int:
    """List the matches on stdout and return the zero-based index the user picks."""
    if not matches:
        raise ValueError("Cannot choose from an empty list of matches")
    
    click.echo("\nMultiple files found. Please choose one:\n")
    for line in format_choices(matches):
        click.echo(line)
    click.echo()
    
    raw = click.prompt(f"Enter number (1-{len(matches)})", default="", show_default=False)
    return parse_choice(raw, len(matches))

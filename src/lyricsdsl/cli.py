import logging
import sys
from pathlib import Path

import click

from .classify import LineKind, classify_line
from .exceptions import ParseError
from .parser import parse
from .serialize import dumps

# (message, color) shown for each line kind in interactive mode.
_FEEDBACK = {
    LineKind.VERSE: ("Detected verse marker", "blue"),
    LineKind.CHORUS: ("Detected chorus marker", "green"),
    LineKind.BRIDGE: ("Detected bridge marker", "magenta"),
    LineKind.CUSTOM: ("Detected custom section marker", "yellow"),
    LineKind.METADATA: ("Detected metadata", "cyan"),
    LineKind.LYRIC: ("Processed lyric line", "white"),
}

_QUIT_WORDS = {"quit", "exit"}


@click.command()
@click.option("-i", "--input", "input_path", default=None, metavar="FILE",
              help="Lyrics file to parse. Without it, start interactive mode.")
@click.option("-o", "--output", "output_path", default=None, metavar="FILE",
              help="Write the parsed document as JSON to FILE instead of stdout.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Enable debug logging and print a section summary.")
def main(input_path: str | None, output_path: str | None, verbose: bool) -> None:
    """Parse lyrics DSL files into JSON, or classify lines interactively.

    \b
    Example input:
      title:"My Song"
      artist:Author
      VERSE[1]
      Hello
      CHORUS
      World
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if input_path is None:
        _interactive()
        return

    # --- Read ---
    try:
        text = Path(input_path).read_text(encoding="utf-8")
    except OSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Parse ---
    try:
        doc = parse(text)
    except ParseError as exc:
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
        click.echo(exc.excerpt(text), err=True)
        sys.exit(1)

    if verbose:
        for section in doc.sections:
            click.echo(f"  {section.display_label}: {len(section.lines)} line(s)", err=True)

    # --- Output ---
    json_text = dumps(doc) + "\n"
    if output_path is None:
        click.echo(json_text, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(json_text, encoding="utf-8")
    click.echo(f"Written to {dest}")


def _interactive() -> None:
    """Classify stdin lines one at a time until quit/exit or end of input."""
    click.echo(click.style("Interactive Lyrics DSL Mode", fg="magenta", bold=True))
    click.echo(click.style("Type lyrics or DSL lines (type 'quit' to exit):", dim=True))

    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(click.style("lyrics> ", fg="bright_blue"), nl=False)
        raw = stdin.readline()
        if not raw:
            click.echo()
            break

        line = raw.strip()
        if not line:
            continue
        if line in _QUIT_WORDS:
            click.echo(click.style("Goodbye!", fg="bright_yellow"))
            break

        message, color = _FEEDBACK[classify_line(line)]
        click.echo(click.style(message, fg=color))
        click.echo(f"   → {click.style(line, bold=True)}")

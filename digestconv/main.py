import sys
from typing import BinaryIO

import click

from digestconv.config.settings import Settings
from digestconv.converter.converter import build_converter
from digestconv.extraction.exceptions import DigestError
from digestconv.logging.logger import Log
from digestconv.output.formatter import format_result


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """Convert an MD5 digest between hex and base64 (Content-MD5) forms.

    Reads standard input: either a bare digest such as md5sum prints, a
    single 'Content-MD5: ...' header line, or a full HTTP response
    (e.g. from 'curl -sI'). Prints the digest in both encodings.
    """
    settings = Settings()
    Log.configure(settings.log_level)

    stdin = _input_stream()
    if stdin.isatty():
        Log.warning("Reading digest from terminal; finish input with Ctrl-D")

    converter = build_converter(settings)
    try:
        result = converter.convert(stdin)
    except DigestError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(format_result(result))


def _input_stream() -> BinaryIO:
    return sys.stdin.buffer


if __name__ == "__main__":
    main()

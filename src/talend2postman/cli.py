"""CLI entry point for talend2postman."""

import logging
from pathlib import Path

import click

from talend2postman.config import get_settings
from talend2postman.errors import UsageError
from talend2postman.postman.mapper import convert_document
from talend2postman.postman.writer import write_collections
from talend2postman.talend.loader import load_document

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument("paths", nargs=-1, metavar="INPUT OUTPUT", type=click.Path(path_type=Path))
@click.option("--indent", default=None, type=click.IntRange(min=0), help="Indentation of the output JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(package_name="talend2postman")
@click.pass_context
def main(ctx: click.Context, paths: tuple[Path, ...], indent: int | None, verbose: bool):
    """Convert a Talend API Tester export into a Postman v2.1 collection."""
    if len(paths) < 2:
        raise UsageError("expected an input file and an output file", ctx=ctx)

    settings = get_settings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    if len(paths) > 2:
        logger.warning("Ignoring extra arguments: %s", " ".join(str(p) for p in paths[2:]))
    input_file, output_file = paths[0], paths[1]

    document = load_document(input_file)
    collections = convert_document(document)
    logger.info("Converted %s into %d collection(s)", input_file, len(collections))

    write_collections(
        collections,
        output_file,
        indent=settings.indent if indent is None else indent,
    )
    click.echo(f"Successfully wrote Postman collection(s) to: {output_file}")

"""gravgen CLI -- fetch or generate a Gravatar avatar from the command line.

Thin wrapper around :class:`gravgen.avatar.AvatarRequest` using click.
Informational flags (help, usage, version, license, examples) print and
exit with code 99 without touching the network.
"""

from __future__ import annotations

import logging
import os
import sys

import click

from gravgen import __version__
from gravgen.avatar import AvatarRequest
from gravgen.config import GravgenConfig
from gravgen.errors import DestinationExistsError, GravgenError
from gravgen.types import MAX_SIZE, MIN_SIZE, AvatarStyle

INFO_EXIT_CODE = 99


# ---------------------------------------------------------------------------
# Informational sections
# ---------------------------------------------------------------------------


USAGE = f"""\
gravgen [OPTIONS] [FILENAME]

  -e, --email TEXT     Email address to hash for the avatar.
  -f, --filename TEXT  Output filename for the avatar ('-' for stdout).
  -t, --format TEXT    Avatar format: {", ".join(AvatarStyle.values())}.
                       Defaults to '{AvatarStyle.default().value}'.
  -s, --size INTEGER   Image size in pixels ({MIN_SIZE}-{MAX_SIZE}). Defaults to 80.
  --verbose            Log debug output to stderr.

  -h, --help           Show complete documentation.
  -u, --usage          Show program options.
  -v, --version        Display version information.
  -l, --license        Display license.
  -x, --examples       Show usage examples.
"""

EXAMPLES = """\
# Create a random 80x80 avatar, display its values, and store it to disk.
# Reuse the identity to recreate the same avatar at another size later.
gravgen

# Save the identicon for foo@example.com to foo.png.
gravgen -e foo@example.com foo.png

# Write the wavatar for bar@example.com to stdout.
gravgen -e bar@example.com -t wavatar -f- > /tmp/wavatar.png

# Create a random 512x512 monsterid.
gravgen -s 512 -t monsterid /tmp/monsterid.png

# Generate ten random identicons to pick from.
for x in $(seq 10); do gravgen; done

# Resize a random avatar using the identity encoded in its file name.
gravgen --size 32 --email "$(ls avatar_31765_*.png | cut -d_ -f3- | sed 's/\\.png$//')"
"""

LICENSE = """\
Released under the GNU General Public License (GPL), version 3 or later.
https://www.gnu.org/licenses/gpl-3.0.html

This program is distributed in the hope that it will be useful, but
WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
"""

VERSION = f"gravgen {__version__}"

DESCRIPTION = """\
Use the Gravatar public API to retrieve or generate avatars.

Without an email address a random identity is taken from uuidgen.
Without a filename the avatar's values are printed and the image is saved
as avatar_<token>_<identity>.png, unless that file already exists.

Exit codes: 0 = success, 1 = failure, 99 = help/usage.
"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _show(section: str):
    """Build an eager option callback that prints *section* and exits 99."""

    def callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        if section == "help":
            text = "\n\n".join([
                DESCRIPTION.rstrip(),
                "Usage:\n" + USAGE.rstrip(),
                "Examples:\n" + EXAMPLES.rstrip(),
                LICENSE.rstrip(),
            ])
        else:
            text = {
                "usage": USAGE,
                "version": VERSION,
                "license": LICENSE,
                "examples": EXAMPLES,
            }[section]
        click.echo(text.rstrip())
        ctx.exit(INFO_EXIT_CODE)

    return callback


def _configure_logging(config: GravgenConfig, verbose: bool) -> None:
    # Logs go to stderr: stdout may carry raw image bytes
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if verbose:
        logging.getLogger("gravgen").setLevel(logging.DEBUG)


def _info_option(short: str, long: str, section: str, help_text: str):
    return click.option(
        short,
        long,
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show(section),
        help=help_text,
    )


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@click.command(add_help_option=False)
@_info_option("-h", "--help", "help", "Show complete documentation.")
@_info_option("-u", "--usage", "usage", "Show program options.")
@_info_option("-v", "--version", "version", "Display version information.")
@_info_option("-l", "--license", "license", "Display license.")
@_info_option("-x", "--examples", "examples", "Show usage examples.")
@click.option("--email", "-e", default=None, help="Email address to hash for the avatar.")
@click.option("--filename", "-f", default=None, help="Output filename ('-' for stdout).")
@click.option("--format", "-t", "style", default=None, help="Avatar format.")
@click.option("--size", "-s", default=None, help="Image size in pixels.")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.argument("output", required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    email: str | None,
    filename: str | None,
    style: str | None,
    size: str | None,
    verbose: bool,
    output: str | None,
) -> None:
    """Retrieve or generate a Gravatar avatar."""
    # ctx.obj may carry "config", "identity_source" and "token_source" overrides
    obj = ctx.obj or {}
    config = obj.get("config") or GravgenConfig()
    _configure_logging(config, verbose)

    try:
        avatar = AvatarRequest(
            identity=email.lower() if email is not None else None,
            style=style.lower() if style is not None else None,
            size=size,
            identity_source=obj.get("identity_source"),
            config=config,
        )
    except GravgenError as exc:
        _error(f"Error: {exc}")

    # --filename wins over the positional FILENAME; explicit names overwrite
    destination = filename or output
    if destination:
        try:
            avatar.fetch()
            avatar.write(destination)
        except GravgenError as exc:
            _error(f"Error: {exc}")
        return

    # Describe before fetching so readable text never follows image bytes
    click.echo(avatar.describe())
    try:
        avatar.fetch()
    except GravgenError as exc:
        _error(f"Error: {exc}")

    token_source = obj.get("token_source", os.getpid)
    output_file = avatar.auto_filename(token_source())
    try:
        avatar.write(output_file, overwrite=False)
    except DestinationExistsError:
        click.echo(f"Skipped {output_file}: file exists")
        return
    except GravgenError as exc:
        _error(f"Error: {exc}")
    click.echo(f"Created {output_file}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()

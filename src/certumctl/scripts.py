# filename : scripts.py
# created  : 10/17/2026


import logging
import sys
from pathlib import Path

import click

from certumctl.app.config import DEFAULT_TOOL_TIMEOUT, Settings, default_lib_dir
from certumctl.errors import ExitCode, OperatorExit, SetupError

lg = logging.getLogger(__name__)


@click.command()
@click.option(
    "-d",
    "--debug",
    is_flag=True,
    envvar="DEBUG",
    help="Verbose diagnostics, including external command lines.",
)
@click.option(
    "--lib-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="CERTUMCTL_LIB_DIR",
    default=None,
    help="Directory holding the Certum PKCS#11 libraries.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    envvar="CERTUMCTL_TOOL_TIMEOUT",
    default=DEFAULT_TOOL_TIMEOUT,
    show_default=True,
    help="Seconds to wait for each pkcs11-tool invocation.",
)
def certumctl(debug, lib_dir, timeout):
    """Prepare this host for a Certum smartcard and manage the card."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    settings = Settings(
        debug=debug,
        lib_dir=lib_dir or default_lib_dir(),
        tool_timeout=timeout,
    )
    lg.debug("settings: %s", settings)

    from certumctl.app.main import main

    try:
        main(settings)
    except OperatorExit:
        lg.debug("operator exit")
        sys.exit(ExitCode.OK)
    except SetupError as exc:
        lg.error("%s", exc)
        lg.debug("traceback", exc_info=True)
        sys.exit(exc.exit_code)
    except Exception as exc:
        lg.error("error: %s", exc)
        lg.debug("traceback", exc_info=True)
        sys.exit(ExitCode.UNSPECIFIED)

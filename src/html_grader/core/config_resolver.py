# src/html_grader/core/config_resolver.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from html_grader.core.guards import assert_url_exists, require_file
from html_grader.core.managers.config_manager import config_manager
from html_grader.core.utils.configure_logging import set_verbose
from html_grader.model import CheckMode, GraderConfig

logger = logging.getLogger(__name__)

CHECKSFILE_DEFAULT = "checks.json"
HTMLFILE_DEFAULT = "index.html"
URL_DEFAULT = "http://safe-reef-3808.herokuapp.com/"


def build_arg_parser() -> argparse.ArgumentParser:
    """Builds the command-line parser; defaults come from settings.json."""
    checks_default = config_manager.get_nested("defaults.checks_file", CHECKSFILE_DEFAULT)
    html_default = config_manager.get_nested("defaults.html_file", HTMLFILE_DEFAULT)
    url_default = config_manager.get_nested("defaults.url", URL_DEFAULT)

    parser = argparse.ArgumentParser(
        prog="html-grader",
        description="Grade an HTML file or URL for the presence of CSS selectors.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Generates additional output messages.")
    parser.add_argument("-c", "--checks", metavar="CHECK_FILE", default=checks_default,
                        help=f"Path to the checks file, a JSON array of selectors (default: {checks_default}).")
    parser.add_argument("-t", "--type", dest="mode", choices=[m.value for m in CheckMode],
                        default=CheckMode.FILE.value, help="Type of check (default: file).")
    parser.add_argument("-f", "--file", metavar="HTML_FILE", default=html_default,
                        help=f"Path to the HTML file to be checked (default: {html_default}).")
    parser.add_argument("-u", "--url", default=url_default,
                        help=f"URL to be checked (default: {url_default}).")
    return parser


def resolve_config(argv: Optional[List[str]] = None) -> GraderConfig:
    """
    Parses command-line arguments into an immutable GraderConfig.

    The checks file is always validated; the HTML file only in file mode.

    Raises:
        MissingFileError: if a required local file does not exist.
        SystemExit: on argparse usage errors.
    """
    pargs = build_arg_parser().parse_args(argv)
    set_verbose(pargs.verbose)
    logger.info("Command line arguments: %s", argv)

    mode = CheckMode(pargs.mode)
    checks_path = require_file(pargs.checks)
    if mode is CheckMode.FILE:
        target = require_file(pargs.file)
    else:
        target = assert_url_exists(pargs.url)

    return GraderConfig(verbose=pargs.verbose, checks_path=checks_path, mode=mode, target=target)

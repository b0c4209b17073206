from __future__ import annotations

import asyncio
import logging
import sys
from typing import Dict, List, Optional

from html_grader.core.config_resolver import resolve_config
from html_grader.core.managers.config_manager import config_manager
from html_grader.core.services.json_service import write_report
from html_grader.core.utils.configure_logging import configure_logger
from html_grader.exceptions import GraderError, MissingFileError
from html_grader.model import GraderConfig
from html_grader.services.check_service import evaluate, load_checks
from html_grader.services.document_source_service import load_document

logger = logging.getLogger(__name__)


async def grade(config: GraderConfig) -> Dict[str, bool]:
    """Loads the document, then evaluates the sorted selectors against it."""
    document = await load_document(config)
    checks = await asyncio.to_thread(load_checks, config.checks_path)
    return evaluate(document, checks)


def grade_via_command_line(argv: Optional[List[str]] = None) -> int:
    """
    Resolves the configuration, grades the document and prints the JSON report.
    This is the only place where grader errors become exit codes.
    """
    try:
        config = resolve_config(argv)
        results = asyncio.run(grade(config))
    except MissingFileError as e:
        print(e.check.message, file=sys.stderr)
        return 1
    except GraderError as e:
        logger.debug("Grading failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_report(results)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for the html-grader console script."""
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        silenced_loggers={"aiohttp": "WARNING", "asyncio": "WARNING"},
    )
    return grade_via_command_line(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())

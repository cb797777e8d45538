"""Command line entry point: generate ro-crate-metadata.json for an ARC."""

import argparse
import logging
import sys
from collections.abc import Sequence

import yaml
from pydantic import ValidationError

from arc_to_rocrate.arc_files import (
    INVESTIGATION_JSON_SUFFIX,
    investigation_path,
    load_investigation,
    resolve_root,
    write_rocrate,
)
from arc_to_rocrate.config import Config
from arc_to_rocrate.config.logging import LOG_FORMAT, configure_logging
from arc_to_rocrate.errors import InvalidInvestigationError, InvestigationNotFoundError, RoCrateGraphError
from arc_to_rocrate.rocrate import METADATA_FILE_NAME, build_rocrate
from arc_to_rocrate.tracing import initialize_tracing

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="arc-to-rocrate",
        description=f"Generate '{METADATA_FILE_NAME}' for an ARC from its ISA investigation JSON.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="ARC root directory (default: current working directory)",
    )
    return parser.parse_args(argv)


def run(path: str) -> int:
    """Convert the ARC below ``path`` and return the process exit status.

    A missing ISA investigation JSON is reported but still exits with 0.
    """
    root = resolve_root(path)
    logger.info("Generating '%s' file for '%s'", METADATA_FILE_NAME, root)

    try:
        investigation = load_investigation(investigation_path(root))
        document = build_rocrate(investigation)
    except InvestigationNotFoundError:
        logger.error("Directory '%s' contains no '%s' file.", root, INVESTIGATION_JSON_SUFFIX.as_posix())
        return 0
    except (InvalidInvestigationError, RoCrateGraphError) as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Failed to read '%s': %s", investigation_path(root), e)
        return 1

    try:
        output_path = write_rocrate(root, document)
    except OSError as e:
        logger.error("Failed to write '%s': %s", root / METADATA_FILE_NAME, e)
        return 1

    logger.info("Wrote %s", output_path)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Run the main entry point for the CLI."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    args = parse_args(argv)

    try:
        config = Config.from_environment()
        configure_logging(config.log_level)
    except (yaml.YAMLError, ValidationError, RuntimeError, OSError) as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    tracer_provider, tracer = initialize_tracing(
        otlp_endpoint=config.otel.endpoint,
        log_console_spans=config.otel.log_console_spans,
    )
    try:
        with tracer.start_as_current_span("arc_to_rocrate.main"):
            status = run(args.path)
    finally:
        tracer_provider.shutdown()
    sys.exit(status)


if __name__ == "__main__":
    main()

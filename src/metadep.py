"""MetaDep - list metadata of fetched dependencies.

Reads ``hex_metadata.config`` from every dependency directory and prints the
licenses, maintainers, repository link and version found for each.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from args import parse_args
from cli_config import load_config, resolve_options
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from export import export, print_to_console
from metadata.aggregate import select_fields
from metadata.scan import extract_meta_data, normalize_base_path


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    options = resolve_options(args, load_config(args.CONFIG))
    if is_debug_enabled(logger):
        logger.debug(
            "Resolved options: %s",
            options,
            extra=extra_context(event="function_entry", component="cli", action="main"),
        )

    if not os.path.isdir(options.path):
        logging.error("Dependency directory not found: %s", options.path)
        sys.exit(ExitCodes.FILE_ERROR.value)

    meta_dep = extract_meta_data(
        normalize_base_path(options.path),
        options.dep,
        filename=options.metadata_file,
        marker=options.container_marker,
    )
    if not meta_dep:
        logging.warning("No dependency metadata found for '%s' in %s", options.dep, options.path)
        if args.ERROR_ON_EMPTY:
            sys.exit(ExitCodes.NO_DEPENDENCIES.value)

    result = select_fields(meta_dep, options.licences, options.verbose)

    if not args.QUIET:
        print_to_console(result)
    if args.OUTPUT:
        export(result, args.OUTPUT, args.OUTPUT_FORMAT)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()

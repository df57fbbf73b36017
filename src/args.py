"""Argument parsing functionality for MetaDep."""

import argparse
from constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="metadep",
        description=(
            "MetaDep - List licenses, maintainers, repository links and versions "
            "of fetched dependencies"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--path",
                        dest="PATH",
                        help=f"Directory containing the dependency directories (default: {Constants.DEFAULT_PATH})",
                        action="store",
                        type=str)
    parser.add_argument("-d", "--dep",
                        dest="DEP",
                        help="Dependency name or glob pattern (default: all)",
                        action="store",
                        type=str)
    parser.add_argument("-l", "--licences", "--licenses",
                        dest="LICENCES",
                        help="Only list licenses (and versions) for each dependency",
                        action="store_true")
    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="List all metadata for each dependency (default)",
                        action="store_true")

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")
    parser.add_argument("--error-on-empty",
                        dest="ERROR_ON_EMPTY",
                        help="Exit with a non-zero status code if no dependency metadata is found.",
                        action="store_true")

    return parser.parse_args(argv)

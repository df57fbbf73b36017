"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    NO_DEPENDENCIES = 2


class Fields(Enum):
    """Metadata fields tracked for each dependency.

    Args:
        Enum (string): Field names as they appear in the aggregated result.
    """

    LICENSES = "Licenses"
    MAINTAINERS = "Maintainers"
    REPO = "Repo"
    VERSION = "Version"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_PATH = "./deps/"
    DEFAULT_DEP = "*"
    METADATA_FILE = "hex_metadata.config"
    CONTAINER_MARKER = "deps"
    END_OF_TERM = "}."
    UTF8_MARKER = "utf8"
    LICENSES_ONLY_DROP = [Fields.MAINTAINERS.value, Fields.REPO.value]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "METADEP_LOG_LEVEL"
    OUTPUT_FORMATS = ["json", "csv"]
    CONFIG_LOCATIONS = [
        "metadep.yml",
        "metadep.yaml",
        os.path.join("~", ".config", "metadep", "metadep.yml"),
    ]

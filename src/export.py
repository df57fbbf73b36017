"""Output of the aggregated metadata: console, JSON and CSV."""

import csv
import json
import logging
import sys

from constants import ExitCodes, Fields


def print_to_console(meta_dep):
    """Prints one ``(name, fields)`` entry per line, framed by blank lines.

    Args:
        meta_dep (dict): Dependency name to field mapping.
    """
    print("")
    for entry in meta_dep.items():
        print(entry)
    print("")


def export_csv(meta_dep, path):
    """Exports the metadata to a CSV file, one row per dependency.

    Args:
        meta_dep (dict): Dependency name to field mapping.
        path (str): File path to export the CSV.
    """
    fields = [f.value for f in Fields]
    rows = [["Dependency"] + fields]
    for dep_name, dep_fields in meta_dep.items():
        rows.append([dep_name] + [dep_fields.get(f, "") for f in fields])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            export = csv.writer(file)
            export.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
    except (OSError, csv.Error) as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_json(meta_dep, path):
    """Exports the metadata to a JSON file.

    Args:
        meta_dep (dict): Dependency name to field mapping.
        path (str): File path to export the JSON.
    """
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(meta_dep, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def resolve_format(path, fmt=None):
    """Pick the export format from an explicit choice or the file extension (default json)."""
    if fmt:
        return fmt.lower()
    if path.lower().endswith(".csv"):
        return "csv"
    return "json"


def export(meta_dep, path, fmt=None):
    """Writes ``meta_dep`` to ``path`` in the resolved format."""
    if resolve_format(path, fmt) == "csv":
        export_csv(meta_dep, path)
    else:
        export_json(meta_dep, path)

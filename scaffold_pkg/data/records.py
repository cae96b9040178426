#!/usr/bin/env python3
"""
Record Data File Generation

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Builds sObject Tree import files ('sf data import tree --files ...') from
plain dict rows. The generated field metadata is the source of truth for
which fields are required.
"""
import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List

from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.xml_utils import find_text, read_document

logger = logging.getLogger(__name__)

FIELD_SUFFIX = '.field-meta.xml'


def find_required_fields(objects_root, descriptor) -> List[str]:
    """
    Reads every .field-meta.xml of the object and returns the full names of
    the fields marked <required>true</required>. Unparseable files are
    reported and skipped.
    """
    fields_folder = Path(objects_root) / descriptor.resolved.folder_name / 'fields'
    if not fields_folder.is_dir():
        logger.debug(f"No fields folder at {fields_folder}")
        return []

    required = []
    for path in sorted(fields_folder.glob(f'*{FIELD_SUFFIX}')):
        try:
            root = read_document(path)
        except ET.ParseError:
            console.print(f"[yellow]Warning: Could not parse XML file: {path}[/yellow]")
            continue
        full_name = find_text(root, 'fullName')
        if full_name and find_text(root, 'required') == 'true':
            required.append(full_name)
    return required


def format_records(descriptor, rows: List[Dict[str, Any]], required_field_names: List[str]) -> Dict[str, Any]:
    """
    Wraps rows in the sObject Tree envelope.

    - AutoNumber objects: a supplied 'Name' is dropped (the platform ignores it)
    - Required fields missing from a row are sent as explicit nulls
    - Each record gets attributes {type, referenceId: 'ref<index>'}; a row can
      not override them

    Input rows are not modified.
    """
    api_name = descriptor.api_name
    auto_number = descriptor.effective_name_field.is_auto_number

    formatted = []
    for index, row in enumerate(rows):
        record = dict(row)
        if auto_number and 'Name' in record:
            console.print(f"[yellow]⚠️  Warning: Record {index + 1} has a 'Name' value, but object is AutoNumber. Ignoring.[/yellow]")
            del record['Name']

        for field_name in required_field_names:
            if field_name not in record:
                console.print(f"[yellow]⚠️  Warning: Record {index + 1} missing '{field_name}'. Auto-filling null.[/yellow]")
                record[field_name] = None

        if 'attributes' in record:
            logger.debug(f"Record {index + 1}: ignoring user supplied 'attributes'")
            del record['attributes']

        formatted.append({
            'attributes': {'type': api_name, 'referenceId': f'ref{index}'},
            **record
        })

    return {'records': formatted}


def data_file_path(project_root, descriptor) -> Path:
    return Path(project_root) / 'data' / f'{descriptor.raw_name}-data.json'


def write_records(project_root, objects_root, descriptor, rows) -> Path:
    """
    Formats rows for the object and writes data/<Object>-data.json under
    the project root.
    """
    required_field_names = find_required_fields(objects_root, descriptor)
    payload = format_records(descriptor, rows, required_field_names)

    output_path = data_file_path(project_root, descriptor)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=4)
    console.print(f"[green]✅ Data File Generated: {output_path}[/green]")
    return output_path

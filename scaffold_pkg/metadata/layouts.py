#!/usr/bin/env python3
"""
Page Layout Utilities

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Creates default page layouts and injects fields / related lists into
existing ones. Layouts are usually retrieved from the org, so a missing
layout file is reported and skipped rather than treated as an error.

Fields always go into the first column of the FIRST two-column section of
the layout. There is no per-section targeting.
"""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from scaffold_pkg.metadata.names import layout_file_name
from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import OperationResult, Outcome
from scaffold_pkg.utils.xml_utils import (
    NS, add_text, find_text, new_document, read_document, sf_tag, write_document
)

logger = logging.getLogger(__name__)

LAYOUT_SUFFIX = '.layout-meta.xml'
TWO_COLUMN_STYLE_PREFIX = 'TwoColumns'
RELATED_LIST_COLUMN = 'NAME'

# (label, [column 1 items], [column 2 items]); items are (behavior, field)
DEFAULT_SECTIONS = [
    ('Information', [('Required', 'Name')], [('Edit', 'OwnerId')]),
    ('System Information', [('Readonly', 'CreatedById')], [('Readonly', 'LastModifiedById')]),
]


def layouts_folder(objects_root):
    return Path(objects_root).parent / 'layouts'


def layout_path(objects_root, layout_name):
    file_name = layout_name if layout_name.endswith(LAYOUT_SUFFIX) else f'{layout_name}{LAYOUT_SUFFIX}'
    return layouts_folder(objects_root) / file_name


def _add_layout_item(column, behavior, field_name):
    item = add_text(column, 'layoutItems', None)
    add_text(item, 'behavior', behavior)
    add_text(item, 'field', field_name)
    return item


def _add_section(root, label, custom_label=False):
    section = add_text(root, 'layoutSections', None)
    add_text(section, 'customLabel', custom_label)
    add_text(section, 'detailHeading', False)
    add_text(section, 'editHeading', True)
    add_text(section, 'label', label)
    return section


def compile_default_layout():
    root = new_document('Layout')
    for label, left, right in DEFAULT_SECTIONS:
        section = _add_section(root, label)
        for items in (left, right):
            column = add_text(section, 'layoutColumns', None)
            for behavior, field_name in items:
                _add_layout_item(column, behavior, field_name)
        add_text(section, 'style', 'TwoColumnsTopToBottom')
    links = _add_section(root, 'Custom Links', custom_label=True)
    add_text(links, 'style', 'CustomLinks')
    return root


def create_layout(objects_root, target):
    """
    Writes the standard Information / System Information / Custom Links
    layout for an object, e.g. 'Offer__c-Offer Layout.layout-meta.xml'.
    target is an ObjectDescriptor or a plain object name.
    """
    folder = layouts_folder(objects_root)
    folder.mkdir(parents=True, exist_ok=True)

    name = layout_file_name(target)
    path = write_document(folder / f'{name}{LAYOUT_SUFFIX}', compile_default_layout())
    logger.debug(f"Wrote {path}")
    console.print(f"📄 Created Layout: {path.name}")
    return OperationResult(Outcome.CREATED, name)


def first_two_column_section(root):
    """
    Returns the first layoutSections element whose style starts with
    'TwoColumns' and that has at least one column, or None.
    """
    for section in root.findall('sf:layoutSections', NS):
        style = find_text(section, 'style') or ''
        if not style.startswith(TWO_COLUMN_STYLE_PREFIX):
            continue
        if section.find('sf:layoutColumns', NS) is not None:
            return section
    return None


def has_field(root, field_api_name):
    return any(el.text == field_api_name for el in root.iter(sf_tag('field')))


def has_related_list(root, related_list):
    return any(el.text == related_list for el in root.iter(sf_tag('relatedList')))


def _load_layout(objects_root, layout_name):
    """
    Returns (path, root, failure). root is None when the file is missing or
    cannot be parsed, and failure then holds the result to hand back.
    """
    path = layout_path(objects_root, layout_name)
    if not path.exists():
        console.print(f"[red]❌ Warning: Layout '{path.name}' not found. Skipping.[/red]")
        return path, None, OperationResult(Outcome.SKIPPED_MISSING, layout_name, f"{path} not found")
    try:
        return path, read_document(path), None
    except ET.ParseError as e:
        console.print(f"[yellow]Warning: Could not parse XML file: {path}[/yellow]")
        logger.debug(f"Parse error in {path}: {e}")
        return path, None, OperationResult(Outcome.FAILED, layout_name, f"could not parse {path}: {e}")


def add_field_to_layout(objects_root, layout_name, field_api_name):
    """
    Adds an Edit layout item for field_api_name at the end of the first
    column of the first two-column section.

    Returns:
        OperationResult: UPDATED, SKIPPED_DUPLICATE, SKIPPED_MISSING, NOT_APPLICABLE
            or FAILED (unparseable layout)
    """
    path, root, failure = _load_layout(objects_root, layout_name)
    if root is None:
        return failure

    if has_field(root, field_api_name):
        console.print(f"ℹ️  Field '{field_api_name}' already on layout '{layout_name}'.")
        return OperationResult(Outcome.SKIPPED_DUPLICATE, layout_name)

    section = first_two_column_section(root)
    if section is None:
        console.print(f"[yellow]⚠️  Could not find a 2-column section in {layout_name}.[/yellow]")
        return OperationResult(Outcome.NOT_APPLICABLE, layout_name, "no two-column section")

    column = section.find('sf:layoutColumns', NS)
    _add_layout_item(column, 'Edit', field_api_name)
    write_document(path, root)
    console.print(f"[green]✅ Added '{field_api_name}' to layout: {layout_name}[/green]")
    return OperationResult(Outcome.UPDATED, layout_name)


def add_related_list_to_layout(objects_root, layout_name, child_object_api_name, lookup_field_api_name):
    """
    Adds the related list for child records pointing at this object through
    lookup_field_api_name, e.g. 'Offer__c.Property__c' on the Property layout.
    """
    related_list = f'{child_object_api_name}.{lookup_field_api_name}'
    path, root, failure = _load_layout(objects_root, layout_name)
    if root is None:
        return failure

    if has_related_list(root, related_list):
        console.print(f"ℹ️  Related list '{related_list}' already on layout '{layout_name}'.")
        return OperationResult(Outcome.SKIPPED_DUPLICATE, layout_name)

    block = add_text(root, 'relatedLists', None)
    add_text(block, 'fields', RELATED_LIST_COLUMN)
    add_text(block, 'relatedList', related_list)
    write_document(path, root)
    console.print(f"[green]✅ Added related list '{related_list}' to layout: {layout_name}[/green]")
    return OperationResult(Outcome.UPDATED, layout_name)

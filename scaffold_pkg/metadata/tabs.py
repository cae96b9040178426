#!/usr/bin/env python3
"""
Tab and App Utilities

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License
"""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from scaffold_pkg.metadata.names import resolve_target
from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import OperationResult, Outcome
from scaffold_pkg.utils.xml_utils import NS, add_text, new_document, read_document, sf_tag, write_document

logger = logging.getLogger(__name__)

APP_SUFFIX = '.app-meta.xml'


def create_tab(objects_root, target, motif):
    """
    Writes tabs/<ApiName>.tab-meta.xml for a custom object.

    Args:
        target: ObjectDescriptor or object name (e.g. 'Offer')
        motif: Tab icon, e.g. 'Custom1: Heart'
    """
    api_name = resolve_target(target)[1].api_name
    folder = Path(objects_root).parent / 'tabs'
    folder.mkdir(parents=True, exist_ok=True)

    root = new_document('CustomTab')
    add_text(root, 'customObject', True)
    add_text(root, 'motif', motif)
    add_text(root, 'description', 'Created via automation script')
    path = write_document(folder / f'{api_name}.tab-meta.xml', root)
    logger.debug(f"Wrote {path}")
    console.print(f"✨ Created Tab: {api_name}")
    return OperationResult(Outcome.CREATED, api_name)


def add_tab_to_app(objects_root, app_name, target):
    """
    Adds the object's tab to an existing Lightning app, right after the
    app's last tab. An app file that cannot be parsed is left untouched
    and reported as FAILED.
    """
    api_name = resolve_target(target)[1].api_name
    file_name = app_name if app_name.endswith(APP_SUFFIX) else f'{app_name}{APP_SUFFIX}'
    app_path = Path(objects_root).parent / 'applications' / file_name

    if not app_path.exists():
        console.print(f"[red]❌ Error: App file {app_path} not found.[/red]")
        return OperationResult(Outcome.SKIPPED_MISSING, app_name, f"{app_path} not found")

    try:
        root = read_document(app_path)
    except ET.ParseError as e:
        console.print(f"[yellow]Warning: Could not parse XML file: {app_path}[/yellow]")
        logger.debug(f"Parse error in {app_path}: {e}")
        return OperationResult(Outcome.FAILED, app_name, f"could not parse {app_path}: {e}")

    tabs = root.findall('sf:tabs', NS)
    if any(tab.text == api_name for tab in tabs):
        console.print(f"ℹ️  Tab {api_name} is already in {app_name}")
        return OperationResult(Outcome.SKIPPED_DUPLICATE, app_name)

    if tabs:
        position = list(root).index(tabs[-1]) + 1
        new_tab = root.makeelement(sf_tag('tabs'), {})
        new_tab.text = api_name
        root.insert(position, new_tab)
    else:
        add_text(root, 'tabs', api_name)

    write_document(app_path, root)
    logger.debug(f"Rewrote {app_path}")
    console.print(f"[green]✅ Added {api_name} to App: {app_name}[/green]")
    return OperationResult(Outcome.UPDATED, app_name)

#!/usr/bin/env python3
"""
Permission Set Generator

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Generates a '<Object>_Manager' permission set granting full access to an
object, its fields and its tab.
"""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from scaffold_pkg.metadata.names import resolve_target
from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import OperationResult, Outcome
from scaffold_pkg.utils.xml_utils import add_text, find_text, new_document, read_document, write_document

logger = logging.getLogger(__name__)

FIELD_SUFFIX = '.field-meta.xml'
OBJECT_PERMISSIONS = (
    'allowCreate', 'allowDelete', 'allowEdit', 'allowRead', 'modifyAllRecords'
)


def permission_set_name(object_name):
    return f'{object_name}_Manager'


def grantable_field_api_names(fields):
    """
    Filters field definitions down to the ones that can carry field-level
    security. Required and Master-Detail fields are always readable and
    editable, and a deploy fails if the permission set lists them.
    """
    return [
        field.api_name for field in fields
        if not field.required and field.type != 'MasterDetail'
    ]


def discover_field_api_names(objects_root, target):
    """
    Lists the field API names already written under the object's fields
    folder that can carry field-level security. Required and Master-Detail
    fields are left out, as are files that cannot be parsed. A missing
    folder yields an empty list.

    Args:
        target: ObjectDescriptor or object name as used in the runner
    """
    _, resolved = resolve_target(target)
    fields_folder = Path(objects_root) / resolved.folder_name / 'fields'
    if not fields_folder.is_dir():
        logger.info(f"No fields folder at {fields_folder}, granting object access only")
        return []
    names = []
    for path in fields_folder.iterdir():
        if not path.name.endswith(FIELD_SUFFIX):
            continue
        try:
            root = read_document(path)
        except ET.ParseError:
            console.print(f"[yellow]Warning: Could not parse XML file: {path}[/yellow]")
            continue
        if find_text(root, 'required') == 'true' or find_text(root, 'type') == 'MasterDetail':
            logger.debug(f"Skipping {path.name}: field-level security not allowed")
            continue
        names.append(path.name[:-len(FIELD_SUFFIX)])
    return sorted(names)


def compile_permission_set(target, field_api_names):
    raw_name, resolved = resolve_target(target)
    api_name = resolved.api_name

    root = new_document('PermissionSet')
    add_text(root, 'label', f'{raw_name} Manager')
    add_text(root, 'hasActivationRequired', False)

    object_permissions = add_text(root, 'objectPermissions', None)
    for permission in OBJECT_PERMISSIONS:
        add_text(object_permissions, permission, True)
    add_text(object_permissions, 'object', api_name)
    add_text(object_permissions, 'viewAllRecords', True)

    for field_api_name in field_api_names:
        field_permissions = add_text(root, 'fieldPermissions', None)
        add_text(field_permissions, 'editable', True)
        add_text(field_permissions, 'field', f'{api_name}.{field_api_name}')
        add_text(field_permissions, 'readable', True)

    tab_settings = add_text(root, 'tabSettings', None)
    add_text(tab_settings, 'tab', api_name)
    add_text(tab_settings, 'visibility', 'Visible')
    return root


def write_permission_set(objects_root, target, field_api_names=None):
    """
    Writes permissionsets/<Object>_Manager.permissionset-meta.xml.

    Args:
        objects_root: The SFDX 'objects' folder
        target: ObjectDescriptor, or object name as used in the runner
            (e.g. 'Offer'). A descriptor's own resolver decides the API name.
        field_api_names: Fields to grant read/edit on. When None, the fields
            already written for the object on disk are used.
    """
    raw_name, _ = resolve_target(target)
    if field_api_names is None:
        field_api_names = discover_field_api_names(objects_root, target)

    folder = Path(objects_root).parent / 'permissionsets'
    folder.mkdir(parents=True, exist_ok=True)

    name = permission_set_name(raw_name)
    file_name = f'{name}.permissionset-meta.xml'
    write_document(folder / file_name, compile_permission_set(target, field_api_names))
    console.print(f"🔑 Created Permission Set: {file_name} ({len(field_api_names)} field(s))")
    return OperationResult(Outcome.CREATED, name)

#!/usr/bin/env python3
"""
Custom Object Generation

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scaffold_pkg.metadata.names import NameResolver, ResolvedName, default_resolver
from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import ConfigurationError
from scaffold_pkg.utils.xml_utils import add_text, new_document, write_document

logger = logging.getLogger(__name__)

NAME_FIELD_TYPES = ('Text', 'AutoNumber')

ENABLED_FEATURES = (
    'enableSharing', 'enableBulkApi', 'enableStreamingApi',
    'enableActivities', 'enableReports', 'enableSearch'
)


@dataclass
class NameFieldSpec:
    label: str
    type: str = 'Text'
    display_format: Optional[str] = None
    starting_number: int = 1

    @property
    def is_auto_number(self) -> bool:
        return self.type == 'AutoNumber'

    def validate(self) -> None:
        if self.type not in NAME_FIELD_TYPES:
            raise ConfigurationError(f"Name field type must be Text or AutoNumber, got '{self.type}'")
        if self.is_auto_number and not self.display_format:
            raise ConfigurationError("AutoNumber requires a displayFormat (e.g. OF-{0000})")


@dataclass
class ObjectDescriptor:
    raw_name: str
    label: str
    plural_label: str
    name_field: Optional[NameFieldSpec] = None
    resolver: NameResolver = default_resolver

    @property
    def resolved(self) -> ResolvedName:
        return self.resolver.resolve(self.raw_name)

    @property
    def api_name(self) -> str:
        return self.resolved.api_name

    @property
    def is_standard(self) -> bool:
        return self.resolved.is_standard

    @property
    def effective_name_field(self) -> NameFieldSpec:
        return self.name_field or NameFieldSpec(label=f'{self.label} Name')


def _add_name_field(root, spec: NameFieldSpec) -> None:
    spec.validate()
    name_field = add_text(root, 'nameField', None)
    if spec.is_auto_number:
        add_text(name_field, 'displayFormat', spec.display_format)
        add_text(name_field, 'label', spec.label)
        add_text(name_field, 'type', 'AutoNumber')
        add_text(name_field, 'startingNumber', spec.starting_number or 1)
    else:
        add_text(name_field, 'label', spec.label)
        add_text(name_field, 'type', 'Text')


def compile_object(descriptor: ObjectDescriptor):
    root = new_document('CustomObject')
    add_text(root, 'fullName', descriptor.api_name)
    add_text(root, 'label', descriptor.label)
    add_text(root, 'pluralLabel', descriptor.plural_label)
    add_text(root, 'deploymentStatus', 'Deployed')
    add_text(root, 'sharingModel', 'ReadWrite')
    for flag in ENABLED_FEATURES:
        add_text(root, flag, True)
    _add_name_field(root, descriptor.effective_name_field)
    return root


def write_object(objects_root, descriptor: ObjectDescriptor) -> Path:
    """
    Writes <Folder>/<ApiName>.object-meta.xml and makes sure the fields
    folder exists. An existing object file is overwritten.

    Returns:
        Path: the object's fields directory
    """
    # Compile first so a bad name field never leaves a half-created folder
    root = compile_object(descriptor)

    resolved = descriptor.resolved
    object_folder = Path(objects_root) / resolved.folder_name
    fields_folder = object_folder / 'fields'
    fields_folder.mkdir(parents=True, exist_ok=True)

    path = write_document(object_folder / f'{resolved.api_name}.object-meta.xml', root)
    logger.debug(f"Wrote {path}")
    console.print(f"[green]✅ Created Object: {resolved.api_name}[/green]")
    if descriptor.effective_name_field.is_auto_number:
        console.print(f"ℹ️  Note: Object '{descriptor.raw_name}' uses AutoNumber. Records do not need a 'Name' value.")
    return fields_folder

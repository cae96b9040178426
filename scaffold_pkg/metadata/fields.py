#!/usr/bin/env python3
"""
Custom Field Generation

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Turns field definitions into CustomField metadata. Each field type gets the
extra tags the Metadata API requires for it (precision/scale, length,
relationship settings).
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from scaffold_pkg.metadata.names import CUSTOM_SUFFIX
from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import ConfigurationError
from scaffold_pkg.utils.xml_utils import add_text, new_document, to_xml_string, write_document

logger = logging.getLogger(__name__)

FIELD_TYPES = (
    'Text', 'Number', 'Currency', 'Checkbox', 'Date', 'DateTime', 'Email',
    'Percent', 'Phone', 'Url', 'TextArea', 'Lookup', 'MasterDetail'
)
RELATIONSHIP_TYPES = ('Lookup', 'MasterDetail')

# Fixed type-specific tags, in the order they are emitted
NUMERIC_TAGS = {
    'Currency': (('precision', 18), ('scale', 2)),
    'Percent': (('precision', 18), ('scale', 2)),
    'Number': (('precision', 18), ('scale', 0)),
}
TEXT_LENGTH = 255
TEXT_TYPES = ('Text', 'Email', 'Url', 'Phone')


@dataclass
class FieldDescriptor:
    name: str
    type: str
    label: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    reference_to: Optional[str] = None
    relationship_label: Optional[str] = None
    relationship_name: Optional[str] = None

    @property
    def api_name(self) -> str:
        return f'{self.name}{CUSTOM_SUFFIX}'

    @property
    def display_label(self) -> str:
        return self.label if self.label else self.name.replace('_', ' ')


def _validate(field: FieldDescriptor) -> None:
    if field.type not in FIELD_TYPES:
        raise ConfigurationError(
            f"Field '{field.name}' has unsupported type '{field.type}'. "
            f"Expected one of: {', '.join(FIELD_TYPES)}"
        )
    if field.type in RELATIONSHIP_TYPES and not field.reference_to:
        raise ConfigurationError(
            f"{field.type} field '{field.name}' requires reference_to (e.g. 'Property__c')"
        )


def _add_relationship_tags(root, field: FieldDescriptor) -> None:
    add_text(root, 'referenceTo', field.reference_to)
    add_text(root, 'relationshipLabel', field.relationship_label or field.display_label)
    add_text(root, 'relationshipName', field.relationship_name or field.name)


def compile_field(field: FieldDescriptor):
    """
    Builds the CustomField element for a single field definition.

    Master-Detail fields never get a <required> tag; the relationship makes
    the parent mandatory on its own and the API rejects the tag.

    Raises:
        ConfigurationError: unknown type, or a relationship without reference_to
    """
    _validate(field)

    root = new_document('CustomField')
    add_text(root, 'fullName', field.api_name)
    add_text(root, 'label', field.display_label)
    add_text(root, 'type', field.type)
    if field.description:
        add_text(root, 'description', field.description)
    if field.type != 'MasterDetail':
        add_text(root, 'required', bool(field.required))

    if field.type in NUMERIC_TAGS:
        for tag, value in NUMERIC_TAGS[field.type]:
            add_text(root, tag, value)
    elif field.type in TEXT_TYPES:
        add_text(root, 'length', TEXT_LENGTH)
    elif field.type == 'Lookup':
        add_text(root, 'deleteConstraint', 'SetNull')
        _add_relationship_tags(root, field)
    elif field.type == 'MasterDetail':
        _add_relationship_tags(root, field)
        add_text(root, 'writeRequiresMasterRead', False)
        add_text(root, 'reparentableMasterDetail', False)

    return root


def render_field(field: FieldDescriptor) -> str:
    return to_xml_string(compile_field(field))


def write_fields(fields_dir, fields: List[FieldDescriptor]) -> List[str]:
    """
    Writes one .field-meta.xml per field into fields_dir.

    Every field is compiled before anything is written, so a bad definition
    anywhere in the list leaves the directory untouched.

    Returns:
        list: API names of the fields written, in input order
    """
    fields_dir = Path(fields_dir)
    compiled = [(field, compile_field(field)) for field in fields]

    fields_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for field, root in compiled:
        path = write_document(fields_dir / f'{field.api_name}.field-meta.xml', root)
        logger.debug(f"Wrote {path}")
        console.print(f"   Created Field: {field.api_name} (Label: \"{field.display_label}\")")
        written.append(field.api_name)
    return written

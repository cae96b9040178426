"""Metadata generators: objects, fields, layouts, tabs and permission sets."""

from .names import (
    NameResolver, ResolvedName, STANDARD_OBJECTS, layout_file_name, resolve_object_name, resolve_target
)
from .fields import FieldDescriptor, compile_field, render_field, write_fields
from .objects import NameFieldSpec, ObjectDescriptor, compile_object, write_object
from .layouts import add_field_to_layout, add_related_list_to_layout, create_layout
from .permissions import (
    discover_field_api_names, grantable_field_api_names, permission_set_name, write_permission_set
)
from .tabs import add_tab_to_app, create_tab

__all__ = [
    'NameResolver',
    'ResolvedName',
    'STANDARD_OBJECTS',
    'layout_file_name',
    'resolve_object_name',
    'resolve_target',
    'FieldDescriptor',
    'compile_field',
    'render_field',
    'write_fields',
    'NameFieldSpec',
    'ObjectDescriptor',
    'compile_object',
    'write_object',
    'add_field_to_layout',
    'add_related_list_to_layout',
    'create_layout',
    'discover_field_api_names',
    'grantable_field_api_names',
    'permission_set_name',
    'write_permission_set',
    'add_tab_to_app',
    'create_tab'
]

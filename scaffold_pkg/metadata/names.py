#!/usr/bin/env python3
"""
Object Name Resolution

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Derives API and folder names from the object name used in the runner
scripts. Standard objects keep their name; custom objects get the __c suffix
exactly once.
"""
from typing import FrozenSet, NamedTuple, Tuple

CUSTOM_SUFFIX = '__c'

STANDARD_OBJECTS: FrozenSet[str] = frozenset({
    'Account', 'Contact', 'Opportunity', 'Lead', 'Case'
})


class ResolvedName(NamedTuple):
    api_name: str
    folder_name: str
    is_standard: bool


class NameResolver:
    def __init__(self, standard_objects: FrozenSet[str] = STANDARD_OBJECTS):
        self.standard_objects = frozenset(standard_objects)

    def is_standard(self, raw_name: str) -> bool:
        return raw_name in self.standard_objects

    def resolve(self, raw_name: str) -> ResolvedName:
        is_standard = self.is_standard(raw_name)
        if is_standard or raw_name.endswith(CUSTOM_SUFFIX):
            return ResolvedName(raw_name, raw_name, is_standard)
        api_name = f'{raw_name}{CUSTOM_SUFFIX}'
        return ResolvedName(api_name, api_name, False)


default_resolver = NameResolver()


def resolve_object_name(raw_name: str) -> ResolvedName:
    return default_resolver.resolve(raw_name)


def simple_name(raw_name: str) -> str:
    """'Offer__c' -> 'Offer'"""
    return raw_name.replace(CUSTOM_SUFFIX, '')


def resolve_target(target) -> Tuple[str, ResolvedName]:
    """
    Accepts an ObjectDescriptor or a plain object name and returns
    (raw_name, ResolvedName). Descriptors resolve through their own resolver.
    """
    resolved = getattr(target, 'resolved', None)
    if resolved is not None:
        return target.raw_name, resolved
    return target, resolve_object_name(target)


def layout_file_name(target) -> str:
    """
    Layout naming follows '<ApiName>-<Label> Layout', e.g. 'Offer__c-Offer Layout'.
    """
    raw_name, resolved = resolve_target(target)
    return f'{resolved.api_name}-{simple_name(raw_name)} Layout'

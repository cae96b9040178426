"""
Tests for object name resolution
"""

import pytest

from scaffold_pkg.metadata.names import (
    STANDARD_OBJECTS, NameResolver, layout_file_name, resolve_object_name, resolve_target
)
from scaffold_pkg.metadata.objects import ObjectDescriptor

QUOTE = ObjectDescriptor('Quote', 'Quote', 'Quotes', resolver=NameResolver(frozenset({'Quote'})))


class TestResolveObjectName:
    """Standard vs custom object naming"""

    def test_standard_object_unchanged(self):
        resolved = resolve_object_name('Account')
        assert resolved.api_name == 'Account'
        assert resolved.folder_name == 'Account'
        assert resolved.is_standard is True

    def test_custom_object_gets_suffix(self):
        resolved = resolve_object_name('Property')
        assert resolved.api_name == 'Property__c'
        assert resolved.folder_name == 'Property__c'
        assert resolved.is_standard is False

    def test_already_suffixed_is_not_doubled(self):
        resolved = resolve_object_name('Property__c')
        assert resolved.api_name == 'Property__c'
        assert resolved.folder_name == 'Property__c'

    @pytest.mark.parametrize('raw_name', ['Offer', 'Favorite', 'Lead', 'Rma__c', 'Case'])
    def test_resolution_is_a_fixed_point(self, raw_name):
        once = resolve_object_name(raw_name).api_name
        assert resolve_object_name(once).api_name == once

    @pytest.mark.parametrize('raw_name', sorted(STANDARD_OBJECTS))
    def test_every_standard_object_keeps_its_name(self, raw_name):
        assert resolve_object_name(raw_name).api_name == raw_name


class TestNameResolver:
    def test_injected_standard_objects(self):
        resolver = NameResolver(frozenset({'Quote'}))
        assert resolver.resolve('Quote').api_name == 'Quote'
        # Not in this resolver's allow-list
        assert resolver.resolve('Account').api_name == 'Account__c'

    def test_standard_list_is_immutable(self):
        assert isinstance(STANDARD_OBJECTS, frozenset)


class TestResolveTarget:
    def test_plain_name_uses_default_resolver(self):
        raw_name, resolved = resolve_target('Quote')
        assert raw_name == 'Quote'
        assert resolved.api_name == 'Quote__c'

    def test_descriptor_uses_its_own_resolver(self):
        raw_name, resolved = resolve_target(QUOTE)
        assert raw_name == 'Quote'
        assert resolved.api_name == 'Quote'
        assert resolved.folder_name == 'Quote'
        assert resolved.is_standard is True


class TestLayoutFileName:
    def test_custom_object(self):
        assert layout_file_name('Offer') == 'Offer__c-Offer Layout'

    def test_suffixed_input(self):
        assert layout_file_name('Offer__c') == 'Offer__c-Offer Layout'

    def test_standard_object(self):
        assert layout_file_name('Account') == 'Account-Account Layout'

    def test_descriptor_resolver(self):
        assert layout_file_name(QUOTE) == 'Quote-Quote Layout'

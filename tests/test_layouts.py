"""
Tests for page layout creation and mutation
"""

from scaffold_pkg.metadata.layouts import (
    add_field_to_layout, add_related_list_to_layout, create_layout, layout_path
)
from scaffold_pkg.metadata.names import NameResolver
from scaffold_pkg.metadata.objects import ObjectDescriptor
from scaffold_pkg.utils.results import Outcome
from scaffold_pkg.utils.xml_utils import NS, find_text, read_document

LAYOUT = 'Offer__c-Offer Layout'

MULTI_SECTION_LAYOUT = """<?xml version="1.0" encoding="UTF-8"?>
<Layout xmlns="http://soap.sforce.com/2006/04/metadata">
    <layoutSections>
        <customLabel>false</customLabel>
        <label>Header</label>
        <layoutColumns>
            <layoutItems>
                <behavior>Readonly</behavior>
                <field>Name</field>
            </layoutItems>
        </layoutColumns>
        <style>OneColumn</style>
    </layoutSections>
    <layoutSections>
        <label>Details</label>
        <layoutColumns>
            <layoutItems>
                <behavior>Edit</behavior>
                <field>OwnerId</field>
            </layoutItems>
        </layoutColumns>
        <layoutColumns/>
        <style>TwoColumnsLeftToRight</style>
    </layoutSections>
    <layoutSections>
        <label>More Details</label>
        <layoutColumns/>
        <layoutColumns/>
        <style>TwoColumnsTopToBottom</style>
    </layoutSections>
</Layout>
"""

NO_TWO_COLUMN_LAYOUT = """<?xml version="1.0" encoding="UTF-8"?>
<Layout xmlns="http://soap.sforce.com/2006/04/metadata">
    <layoutSections>
        <label>Only</label>
        <layoutColumns/>
        <style>OneColumn</style>
    </layoutSections>
</Layout>
"""

MALFORMED_LAYOUT = """<?xml version="1.0" encoding="UTF-8"?>
<Layout xmlns="http://soap.sforce.com/2006/04/metadata">
    <layoutSections>
        <label>Details
</Layout>
"""


def _write_layout(objects_root, content, name=LAYOUT):
    path = layout_path(objects_root, name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


def _column_fields(section, index=0):
    column = section.findall('sf:layoutColumns', NS)[index]
    return [find_text(item, 'field') for item in column.findall('sf:layoutItems', NS)]


class TestCreateLayout:
    def test_default_layout_file(self, objects_root):
        result = create_layout(objects_root, 'Offer')
        assert result.outcome == Outcome.CREATED
        path = objects_root.parent / 'layouts' / 'Offer__c-Offer Layout.layout-meta.xml'
        assert path.exists()

        sections = read_document(path).findall('sf:layoutSections', NS)
        assert [find_text(s, 'label') for s in sections] == ['Information', 'System Information', 'Custom Links']
        assert _column_fields(sections[0], 0) == ['Name']
        assert _column_fields(sections[0], 1) == ['OwnerId']
        assert find_text(sections[2], 'style') == 'CustomLinks'

    def test_descriptor_resolver_names_the_layout(self, objects_root):
        quote = ObjectDescriptor('Quote', 'Quote', 'Quotes', resolver=NameResolver(frozenset({'Quote'})))
        result = create_layout(objects_root, quote)
        assert result.target == 'Quote-Quote Layout'
        assert layout_path(objects_root, 'Quote-Quote Layout').exists()


class TestAddFieldToLayout:
    def test_missing_layout_is_skipped(self, objects_root):
        result = add_field_to_layout(objects_root, LAYOUT, 'Offer_Amount__c')
        assert result.outcome == Outcome.SKIPPED_MISSING
        assert not result.ok
        assert not layout_path(objects_root, LAYOUT).exists()

    def test_adds_to_first_column_of_first_section(self, objects_root):
        create_layout(objects_root, 'Offer')
        result = add_field_to_layout(objects_root, LAYOUT, 'Offer_Amount__c')
        assert result.outcome == Outcome.UPDATED

        root = read_document(layout_path(objects_root, LAYOUT))
        information = root.findall('sf:layoutSections', NS)[0]
        assert _column_fields(information, 0) == ['Name', 'Offer_Amount__c']
        item = information.find('sf:layoutColumns', NS).findall('sf:layoutItems', NS)[-1]
        assert find_text(item, 'behavior') == 'Edit'

    def test_accepts_file_name_with_extension(self, objects_root):
        create_layout(objects_root, 'Offer')
        result = add_field_to_layout(objects_root, f'{LAYOUT}.layout-meta.xml', 'Offer_Amount__c')
        assert result.outcome == Outcome.UPDATED

    def test_twice_is_same_as_once(self, objects_root):
        create_layout(objects_root, 'Offer')
        path = layout_path(objects_root, LAYOUT)
        add_field_to_layout(objects_root, LAYOUT, 'Offer_Amount__c')
        once = path.read_bytes()
        result = add_field_to_layout(objects_root, LAYOUT, 'Offer_Amount__c')
        assert result.outcome == Outcome.SKIPPED_DUPLICATE
        assert path.read_bytes() == once

    def test_existing_field_anywhere_is_not_added(self, objects_root):
        create_layout(objects_root, 'Offer')
        path = layout_path(objects_root, LAYOUT)
        before = path.read_bytes()
        result = add_field_to_layout(objects_root, LAYOUT, 'LastModifiedById')
        assert result.outcome == Outcome.SKIPPED_DUPLICATE
        assert path.read_bytes() == before

    def test_only_first_two_column_section_receives_field(self, objects_root):
        _write_layout(objects_root, MULTI_SECTION_LAYOUT)
        add_field_to_layout(objects_root, LAYOUT, 'Price__c')

        sections = read_document(layout_path(objects_root, LAYOUT)).findall('sf:layoutSections', NS)
        assert _column_fields(sections[0]) == ['Name']
        assert _column_fields(sections[1], 0) == ['OwnerId', 'Price__c']
        assert _column_fields(sections[1], 1) == []
        assert _column_fields(sections[2], 0) == []

    def test_empty_first_column_receives_field(self, objects_root):
        _write_layout(objects_root, MULTI_SECTION_LAYOUT.replace(
            '<layoutColumns>\n            <layoutItems>\n                <behavior>Edit</behavior>\n'
            '                <field>OwnerId</field>\n            </layoutItems>\n        </layoutColumns>',
            '<layoutColumns/>'))
        add_field_to_layout(objects_root, LAYOUT, 'Price__c')
        sections = read_document(layout_path(objects_root, LAYOUT)).findall('sf:layoutSections', NS)
        assert _column_fields(sections[1], 0) == ['Price__c']

    def test_no_two_column_section(self, objects_root):
        path = _write_layout(objects_root, NO_TWO_COLUMN_LAYOUT)
        result = add_field_to_layout(objects_root, LAYOUT, 'Price__c')
        assert result.outcome == Outcome.NOT_APPLICABLE
        assert path.read_text(encoding='utf-8') == NO_TWO_COLUMN_LAYOUT

    def test_malformed_layout_fails_without_writing(self, objects_root):
        path = _write_layout(objects_root, MALFORMED_LAYOUT)
        result = add_field_to_layout(objects_root, LAYOUT, 'Price__c')
        assert result.outcome == Outcome.FAILED
        assert not result.ok
        assert path.read_text(encoding='utf-8') == MALFORMED_LAYOUT


class TestAddRelatedListToLayout:
    def test_missing_layout_is_skipped(self, objects_root):
        result = add_related_list_to_layout(objects_root, LAYOUT, 'Offer__c', 'Property__c')
        assert result.outcome == Outcome.SKIPPED_MISSING

    def test_appends_related_list_last(self, objects_root):
        create_layout(objects_root, 'Property')
        name = 'Property__c-Property Layout'
        result = add_related_list_to_layout(objects_root, name, 'Offer__c', 'Property__c')
        assert result.outcome == Outcome.UPDATED

        root = read_document(layout_path(objects_root, name))
        last = list(root)[-1]
        assert last.tag.endswith('relatedLists')
        assert find_text(last, 'relatedList') == 'Offer__c.Property__c'
        assert find_text(last, 'fields') == 'NAME'

    def test_twice_is_same_as_once(self, objects_root):
        create_layout(objects_root, 'Property')
        name = 'Property__c-Property Layout'
        path = layout_path(objects_root, name)
        add_related_list_to_layout(objects_root, name, 'Offer__c', 'Property__c')
        once = path.read_bytes()
        result = add_related_list_to_layout(objects_root, name, 'Offer__c', 'Property__c')
        assert result.outcome == Outcome.SKIPPED_DUPLICATE
        assert path.read_bytes() == once

    def test_different_lookup_is_a_new_list(self, objects_root):
        create_layout(objects_root, 'Property')
        name = 'Property__c-Property Layout'
        add_related_list_to_layout(objects_root, name, 'Offer__c', 'Property__c')
        add_related_list_to_layout(objects_root, name, 'Favorite__c', 'Property__c')
        root = read_document(layout_path(objects_root, name))
        related = [find_text(r, 'relatedList') for r in root.findall('sf:relatedLists', NS)]
        assert related == ['Offer__c.Property__c', 'Favorite__c.Property__c']

    def test_malformed_layout_fails_without_writing(self, objects_root):
        path = _write_layout(objects_root, MALFORMED_LAYOUT)
        result = add_related_list_to_layout(objects_root, LAYOUT, 'Favorite__c', 'Offer__c')
        assert result.outcome == Outcome.FAILED
        assert result.target == LAYOUT
        assert path.read_text(encoding='utf-8') == MALFORMED_LAYOUT

#!/usr/bin/env python3
"""
Build Real Estate Objects

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Generates the Property, Offer and Favorite objects with their fields, tabs,
layouts and permission sets, and adds the tabs to the Sales app. Deploy the
result with 'sf project deploy start'.
"""
import argparse
import os

from scaffold_pkg.metadata import (
    FieldDescriptor, NameFieldSpec, ObjectDescriptor,
    add_field_to_layout, add_related_list_to_layout, add_tab_to_app,
    create_layout, create_tab, grantable_field_api_names, layout_file_name,
    write_fields, write_object, write_permission_set
)
from scaffold_pkg.utils.config import load_config
from scaffold_pkg.utils.console import console, setup_logging

PROPERTY = ObjectDescriptor('Property', 'Property', 'Properties')
PROPERTY_FIELDS = [
    FieldDescriptor('Price', 'Currency', description='The listed sale price'),
    FieldDescriptor('Listing_Date', 'Date', description='Date went on market'),
    FieldDescriptor('Open_House_Time', 'DateTime', description='Next event time'),
    FieldDescriptor('Address', 'Text', description='Street address'),
    FieldDescriptor('Commission_Rate', 'Percent', description='Agent cut'),
    FieldDescriptor('Zillow_Link', 'Url', description='External link'),
]

OFFER = ObjectDescriptor(
    'Offer', 'Offer', 'Offers',
    NameFieldSpec('Offer Name', 'AutoNumber', display_format='OF-{0000}', starting_number=1)
)
OFFER_FIELDS = [
    FieldDescriptor('Offer_Amount', 'Currency', label='Offer Amount',
                    description='The monetary value of the offer', required=True),
    FieldDescriptor('Target_Close_Date', 'Date', label='Target Close Date',
                    description='Proposed date to close the deal', required=True),
    FieldDescriptor('Property', 'MasterDetail', reference_to='Property__c',
                    relationship_label='Offers', relationship_name='Offers'),
]

FAVORITE = ObjectDescriptor('Favorite', 'Favorite', 'Favorites', NameFieldSpec('Favorite Name'))
FAVORITE_FIELDS = [
    FieldDescriptor('Notes', 'TextArea', label='Personal Notes',
                    description='Why do you like this property?'),
    FieldDescriptor('Rating', 'Number', label='Rating (1-5)', description='Rate this property'),
    FieldDescriptor('Property', 'Lookup', reference_to='Property__c',
                    relationship_label='Favorites', relationship_name='Favorites'),
]

# (object, fields, tab motif)
OBJECTS = [
    (PROPERTY, PROPERTY_FIELDS, 'Custom24: Buildings'),
    (OFFER, OFFER_FIELDS, 'Custom1: Heart'),
    (FAVORITE, FAVORITE_FIELDS, 'Custom11: Star'),
]


def build_object(objects_root, descriptor, fields, motif, app_name):
    console.rule(f"[bold cyan]Building {descriptor.label} Object")

    fields_path = write_object(objects_root, descriptor)
    field_api_names = write_fields(fields_path, fields)

    create_tab(objects_root, descriptor, motif)
    create_layout(objects_root, descriptor)
    layout_name = layout_file_name(descriptor)
    for field_api_name in field_api_names:
        add_field_to_layout(objects_root, layout_name, field_api_name)

    # Required and Master-Detail fields are left out of field-level security
    write_permission_set(objects_root, descriptor, grantable_field_api_names(fields))
    add_tab_to_app(objects_root, app_name, descriptor)


def main():
    parser = argparse.ArgumentParser(description="Generate Property, Offer and Favorite metadata.")
    parser.add_argument('-p', '--project-dir', help='SFDX project directory (overrides sfdx_project_dir in config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging.')
    args = parser.parse_args()

    setup_logging(args.verbose)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    config = load_config(script_dir, project_dir=args.project_dir)
    objects_root = config.objects_root

    console.print(f"🚀 Starting Automation Script... (objects: {objects_root})")

    for descriptor, fields, motif in OBJECTS:
        build_object(objects_root, descriptor, fields, motif, config.default_app)

    # Child records show up on the Property page
    property_layout = layout_file_name(PROPERTY)
    add_related_list_to_layout(objects_root, property_layout, OFFER.api_name, 'Property__c')
    add_related_list_to_layout(objects_root, property_layout, FAVORITE.api_name, 'Property__c')

    console.print("\n[bold green]✨ All Objects Built Successfully.[/bold green]")


if __name__ == "__main__":
    main()

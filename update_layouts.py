#!/usr/bin/env python3
"""
Update Page Layouts

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Adds fields and related lists to an existing page layout. Retrieve the
layout first ('sf project retrieve start --metadata Layout:<name>') when it
was not generated locally.
"""
import argparse
import os

from scaffold_pkg.metadata import add_field_to_layout, add_related_list_to_layout
from scaffold_pkg.utils.config import load_config
from scaffold_pkg.utils.console import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Add fields or related lists to a page layout.")
    parser.add_argument('layout', help="Layout name, e.g. 'Offer__c-Offer Layout'.")
    parser.add_argument('-f', '--field', action='append', default=[],
                        help='Field API name to add to the first two-column section (repeatable).')
    parser.add_argument('-r', '--related-list', action='append', default=[], nargs=2,
                        metavar=('CHILD_OBJECT', 'LOOKUP_FIELD'),
                        help='Child object and lookup field API names (repeatable).')
    parser.add_argument('-p', '--project-dir', help='SFDX project directory (overrides sfdx_project_dir in config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging.')
    args = parser.parse_args()

    setup_logging(args.verbose)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    config = load_config(script_dir, project_dir=args.project_dir)

    for field_api_name in args.field:
        add_field_to_layout(config.objects_root, args.layout, field_api_name)
    for child_object, lookup_field in args.related_list:
        add_related_list_to_layout(config.objects_root, args.layout, child_object, lookup_field)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Generate Sample Records

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Writes data/<Object>-data.json files for 'sf data import tree --files'.
Required fields are read from the generated field metadata, so run
build_objects.py first.
"""
import argparse
import os

from build_objects import OFFER, PROPERTY
from scaffold_pkg.data import write_records
from scaffold_pkg.utils.config import load_config
from scaffold_pkg.utils.console import console, setup_logging

PROPERTY_ROWS = [
    {'Name': '12 Harbor View', 'Price__c': 850000, 'Address__c': '12 Harbor View Rd'},
    {'Name': '400 Elm Street', 'Price__c': 425000, 'Commission_Rate__c': 2.5},
]

OFFER_ROWS = [
    {'Offer_Amount__c': 820000, 'Target_Close_Date__c': '2026-12-01'},
    {'Name': 'Ignored for AutoNumber', 'Offer_Amount__c': 410000},
]


def main():
    parser = argparse.ArgumentParser(description="Generate sObject Tree data files for the sample objects.")
    parser.add_argument('-p', '--project-dir', help='SFDX project directory (overrides sfdx_project_dir in config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging.')
    args = parser.parse_args()

    setup_logging(args.verbose)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    config = load_config(script_dir, project_dir=args.project_dir)

    for descriptor, rows in ((PROPERTY, PROPERTY_ROWS), (OFFER, OFFER_ROWS)):
        console.rule(f"[bold cyan]{descriptor.label} records")
        write_records(config.project_dir, config.objects_root, descriptor, rows)


if __name__ == "__main__":
    main()

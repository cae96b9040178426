#!/usr/bin/env python3
"""
Create Permission Set

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Regenerates '<Object>_Manager' from the fields currently in the object's
source folder. Useful after fields were added outside build_objects.py.
"""
import argparse
import os

from scaffold_pkg.metadata import write_permission_set
from scaffold_pkg.utils.config import load_config
from scaffold_pkg.utils.console import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Generate an <Object>_Manager permission set.")
    parser.add_argument('objects', nargs='*', default=['Offer'], help='Object names (default: Offer).')
    parser.add_argument('-p', '--project-dir', help='SFDX project directory (overrides sfdx_project_dir in config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging.')
    args = parser.parse_args()

    setup_logging(args.verbose)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    config = load_config(script_dir, project_dir=args.project_dir)

    for object_name in args.objects:
        write_permission_set(config.objects_root, object_name)


if __name__ == "__main__":
    main()

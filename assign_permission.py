#!/usr/bin/env python3
"""
Assign Permission Set

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Assigns a generated permission set to the default user of the target org.
Run after the metadata has been deployed.
"""
import argparse
import os

from scaffold_pkg.utils.config import load_config
from scaffold_pkg.utils.console import console, setup_logging
from scaffold_pkg.utils.sf_cli import assign_permission_set

PERM_SET_NAME = 'Offer_Manager'


def main():
    parser = argparse.ArgumentParser(description="Assign a permission set to the default org user.")
    parser.add_argument('-n', '--name', default=PERM_SET_NAME, help=f'Permission set API name (default: {PERM_SET_NAME}).')
    parser.add_argument('-t', '--target-org', help='Org alias (overrides target_org_alias in config.json).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging.')
    args = parser.parse_args()

    setup_logging(args.verbose)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    config = load_config(script_dir, target_org=args.target_org)
    if not config.target_org_alias:
        console.print("[red]Error: Target org alias not provided. Use --target-org or configure 'target_org_alias' in config.json.[/red]")
        return

    assign_permission_set(args.name, config.target_org_alias)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Salesforce CLI Wrapper

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Thin wrapper around the 'sf' executable. Failures are reported on the
console and returned as outcomes; nothing here raises on a failed command.
"""
import json
import logging
import subprocess

from scaffold_pkg.utils.console import console
from scaffold_pkg.utils.results import OperationResult, Outcome

logger = logging.getLogger(__name__)

SF_EXECUTABLE = 'sf'


def run_sf_command(args, cwd=None):
    """
    Runs 'sf <args>' and returns the CompletedProcess, or None when the
    executable cannot be found.
    """
    command = [SF_EXECUTABLE] + list(args)
    logger.debug(f"> {' '.join(command)}")
    try:
        return subprocess.run(command, capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError:
        console.print("[red]❌ Error: 'sf' command not found. Make sure the Salesforce CLI is installed and in your PATH.[/red]")
        return None


def _error_message(result):
    """Pulls the message out of a --json error payload, falling back to stderr."""
    try:
        payload = json.loads(result.stdout) if result.stdout else {}
    except json.JSONDecodeError:
        payload = {}
    return payload.get('message') or result.stderr.strip() or result.stdout.strip()


def assign_permission_set(perm_set_name, target_org):
    """
    Assigns a Permission Set to the default user of the target org.

    Args:
        perm_set_name: API name of the permission set (e.g. 'Offer_Manager')
        target_org: Org alias or username passed to --target-org

    Returns:
        OperationResult: UPDATED on success, FAILED otherwise
    """
    console.print(f"⏳ Attempting to assign Permission Set: {perm_set_name}...")

    result = run_sf_command([
        'org', 'assign', 'permset',
        '--name', perm_set_name,
        '--target-org', target_org,
        '--json'
    ])
    if result is None:
        return OperationResult(Outcome.FAILED, perm_set_name, "sf CLI not found")

    if result.returncode != 0:
        message = _error_message(result)
        console.print("[red]❌ Error assigning permission.[/red]")
        console.print("   (Make sure you have deployed the metadata first!)")
        if message:
            console.print(f"   [dim]{message}[/dim]")
        return OperationResult(Outcome.FAILED, perm_set_name, message)

    console.print(f"[green]✅ Success! Assigned '{perm_set_name}' on {target_org}.[/green]")
    return OperationResult(Outcome.UPDATED, perm_set_name)

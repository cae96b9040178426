#!/usr/bin/env python3
"""
Runner Configuration

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Loads config.json from the script directory. Command line flags override
values from the file, and everything has a default so a fresh checkout runs
without a config file.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scaffold_pkg.utils.results import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_OBJECTS_DIR = 'force-app/main/default/objects'
DEFAULT_APP = 'standard__Sales'


@dataclass
class ScaffoldConfig:
    project_dir: Path
    objects_dir: str = DEFAULT_OBJECTS_DIR
    target_org_alias: Optional[str] = None
    default_app: str = DEFAULT_APP

    @property
    def objects_root(self) -> Path:
        return self.project_dir / self.objects_dir


def load_config(script_dir, project_dir=None, target_org=None):
    """
    Builds a ScaffoldConfig from <script_dir>/config.json.

    Args:
        script_dir: Directory holding config.json (usually the runner's own folder)
        project_dir: Overrides 'sfdx_project_dir' from the file
        target_org: Overrides 'target_org_alias' from the file

    Returns:
        ScaffoldConfig
    """
    script_dir = Path(script_dir)
    config_path = script_dir / 'config.json'
    config = {}
    if config_path.exists():
        try:
            with open(config_path) as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Could not parse {config_path}: {e}") from e
        logger.debug(f"Loaded configuration from {config_path}")
    else:
        logger.debug(f"No config.json at {config_path}, using defaults")

    if project_dir is None:
        project_dir = config.get('sfdx_project_dir', '.')
    resolved_project_dir = Path(project_dir)
    if not resolved_project_dir.is_absolute():
        resolved_project_dir = (script_dir / resolved_project_dir).resolve()

    return ScaffoldConfig(
        project_dir=resolved_project_dir,
        objects_dir=config.get('objects_dir', DEFAULT_OBJECTS_DIR),
        target_org_alias=target_org or config.get('target_org_alias'),
        default_app=config.get('default_app', DEFAULT_APP),
    )

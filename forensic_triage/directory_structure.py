"""
Directory Structure Manager
Creates the working folders the triage session writes into
"""

import logging
from pathlib import Path
from typing import Dict

from .config import TriageConfig

logger = logging.getLogger(__name__)


class WorkspaceLayout:
    """Reports and recovered-files folders for one session"""

    def __init__(self, config: TriageConfig):
        self.dirs: Dict[str, Path] = {
            'reports': Path(config.reports_dir),
            'recovered': Path(config.recovered_dir),
        }

    def create_structure(self):
        """Create every folder that does not exist yet"""
        for dir_path in self.dirs.values():
            if not dir_path.exists():
                dir_path.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created {dir_path.absolute()}")

    def get_path(self, category: str) -> Path:
        return self.dirs[category]

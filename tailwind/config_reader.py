"""
Tailwind Config Reader Module
Resolves the Tailwind CSS configuration used to interpret class names.
"""

import json
import logging
import os
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ':'
DEFAULT_CONFIG_PATH = 'tailwind.config.js'

DEFAULT_CONFIG: Dict[str, Any] = {
    'separator': DEFAULT_SEPARATOR,
    'prefix': '',
}


class TailwindConfigReader:
    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self._cache: Dict[str, Dict[str, Any]] = {}

    def resolve(self, config: Union[str, Path, Dict[str, Any], None]) -> Dict[str, Any]:
        """Merge a config path or inline config over the Tailwind defaults."""
        if isinstance(config, dict):
            user_config = config
        elif config:
            user_config = self.read_config(config)
        else:
            user_config = {}
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in user_config.items() if v is not None})
        return merged

    def read_config(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read tailwind.config.js (through Node.js) or a JSON config file."""
        path = Path(config_path)
        if not path.is_absolute():
            path = self.cwd / path
        path = path.resolve()
        key = str(path)
        if key in self._cache:
            return self._cache[key]
        if not path.exists():
            # projects without a config of their own run on the defaults
            log = logger.debug if Path(config_path) == Path(DEFAULT_CONFIG_PATH) else logger.warning
            log(f"Tailwind config not found at {path}, using defaults")
            config = {}
        elif path.suffix == '.json':
            config = self._read_json(path)
        else:
            config = self._read_with_node(path)
        self._cache[key] = config
        return config

    def _read_json(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            logger.debug(f"Parsed JSON config from {path}")
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read config {path}: {e}")
            return {}
        return config if isinstance(config, dict) else {}

    def _read_with_node(self, path: Path) -> Dict[str, Any]:
        node_script_path = str(path).replace('\\', '\\\\')
        node_script = f"""
        const config = require('{node_script_path}');
        console.log(JSON.stringify(config.default || config));
        """
        try:
            result = subprocess.run(['node', '-e', node_script], capture_output=True, text=True,
                                    check=True, cwd=os.fspath(self.cwd))
            config = json.loads(result.stdout.strip())
            logger.debug(f"Parsed config from {path}: {config}")
        except (OSError, subprocess.CalledProcessError, ValueError) as e:
            logger.warning(f"Failed to parse config {path}: {e}")
            return {}
        return config if isinstance(config, dict) else {}

    def get_separator(self, config: Union[str, Path, Dict[str, Any], None]) -> str:
        separator = self.resolve(config).get('separator')
        if not isinstance(separator, str) or not separator:
            return DEFAULT_SEPARATOR
        return separator

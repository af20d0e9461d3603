from dataclasses import dataclass
from pathlib import Path

from marketing_browser.config.model import GlobalConfig
from marketing_browser.core.dataset import Dataset


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset

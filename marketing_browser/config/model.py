from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_UI_TITLE = "Marketing Dashboard Performance Optimization"
DEFAULT_SUBTITLE = "Channel and region performance"
DEFAULT_DATA_FILE = "data/campaigns.json"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: shown in the navbar
    - data_file: records JSON, already resolved against the config root
    """
    ui_title: str
    subtitle: str
    data_file: Path

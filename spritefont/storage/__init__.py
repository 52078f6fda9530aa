"""
spritefont.storage - metrics documents and sprite font output files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .metrics import (
    MetricsEntry, MetricsDocument, serialize, parse_metrics, DESCRIPTORS
)
from .output import StagedOutput, config_path_for

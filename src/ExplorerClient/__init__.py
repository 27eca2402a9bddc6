# ============================================================================
# ExplorerClient - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from ExplorerClient import MeasurementTracker
#
# Changelog:
#   2026-10-02: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from ExplorerClient.config import ClientConfig, load_config
from ExplorerClient.errors import (
    ConfigurationError,
    DeliveryError,
    DuplicateMeasurementError,
    ExplorerClientError,
    InvalidArgumentError,
    MeasurementNotFoundError,
    TrackerClosedError,
)
from ExplorerClient.measurement import Measurement, MeasurementTable
from ExplorerClient.sinks.base import Sink
from ExplorerClient.sinks.http_sink import HTTPSink
from ExplorerClient.tracker import MeasurementTracker

__all__ = [
    "__version__",
    "ClientConfig",
    "load_config",
    "ConfigurationError",
    "DeliveryError",
    "DuplicateMeasurementError",
    "ExplorerClientError",
    "InvalidArgumentError",
    "MeasurementNotFoundError",
    "TrackerClosedError",
    "Measurement",
    "MeasurementTable",
    "MeasurementTracker",
    "Sink",
    "HTTPSink",
]

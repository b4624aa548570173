"""Risk scoring and security alerts for vehicle telemetry event logs."""

__version__ = "0.1.0"

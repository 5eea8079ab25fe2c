"""Immutable value types for HAL states, ports and LED signals."""

"""Pure conversion, rendering and decision helpers."""

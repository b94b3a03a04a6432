"""Base classes and helpers shared across tool adapters."""

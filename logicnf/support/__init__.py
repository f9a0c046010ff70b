"""Support for interactive use: the excepthook and logging helpers.
"""

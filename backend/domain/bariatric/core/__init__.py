"""Bariatric domain core: value objects, ports and exceptions."""

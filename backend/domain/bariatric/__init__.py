"""Bariatric patient domain: clinical calculators and patient profile."""

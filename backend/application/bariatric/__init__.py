"""Application layer for the bariatric domain."""

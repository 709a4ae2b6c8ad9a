"""Application layer - orchestrates circulation rules over domain protocols."""

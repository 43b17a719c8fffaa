"""Synthetic transaction source for exercising the fraud scorer."""

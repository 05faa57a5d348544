"""Constant tables shared across Assetpress modules."""

"""Base layer: capabilities, error kinds, classification and constructors."""

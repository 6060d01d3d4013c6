"""Storefront: a shopping-cart domain for object-oriented design walkthroughs."""

__version__ = "0.1.0"

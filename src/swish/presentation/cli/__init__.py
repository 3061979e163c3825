"""Swish command line interface."""

"""Routing — ordered route table with prefix-rejecting URI matching.

Routes are registered during setup and frozen into an immutable table
when the router is built.
"""

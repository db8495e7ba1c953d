"""Routing — front-controller path resolution.

A flat route table, a single front-controller prefix, and a containment
check that keeps file routes inside the pages directory.
"""

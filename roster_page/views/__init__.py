"""View rendering module for HTML templates.

This module owns the fragment set and the per-request rendering logic,
separate from routers. Views build the view context and execute the
layout fragment against it.
"""

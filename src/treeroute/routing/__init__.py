"""Routing — regex-free routes tree with O(path-depth) matching.

Routes are registered during setup and compiled into a routes tree on
the first lookup or an explicit ``Router.build()``.
"""

"""Top-level package for the transit line project.

The package keeps the track of each transit line as a chain of segments
between stations, and exposes the services, storage adapters and
configuration needed to embed that core in an application.
"""

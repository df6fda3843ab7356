"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- structure: directory listings
- related: tag based related documents
- content: single documents and the default (first) document
- health: health/monitoring endpoints
"""

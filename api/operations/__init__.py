"""Operations layer for the content API.

This package handles API-facing operations:
- Path confinement (PathResolver)
- Entry visibility (FileFilterPolicy)
- Directory listings (ContentTreeBuilder)
- Document discovery (DocumentWalker, FirstDocumentFinder)
- Related documents ranking (RelevanceEngine)
- Single document rendering (DocumentRenderer)

Principles:
- Single Responsibility Principle
- Dependency Injection
"""

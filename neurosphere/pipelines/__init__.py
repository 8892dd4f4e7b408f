"""
NeuroSphere Pipelines.

Business logic orchestration functions.
"""

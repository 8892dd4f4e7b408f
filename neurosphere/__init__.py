"""
NeuroSphere wellbeing API.

Mood and sleep tracking with derived analytics, plus a proxy to the
externally hosted AI therapist service.
"""

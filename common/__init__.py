"""
Shared infrastructure for the NeuroSphere API.

- database: Async MongoDB connection (Motor)
- auth: Bearer token verification (Firebase, JWT)
- utils: Response envelopes and HTTP exceptions
"""

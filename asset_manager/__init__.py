"""Algorand Asset Manager.

Create and destroy Algorand Standard Assets through a small HTTP service,
signing with keys leased from a kmd wallet for the duration of a single run.
"""

__version__ = "0.1.0"

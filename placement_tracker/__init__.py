"""
Placement Tracker
Student and Training & Placement Office dashboards over placement records.

Architecture:
- Record store: read-only in-memory students and companies
- Aggregator: pure statistics over applications (counts, breakdowns, joins)
- FastAPI: JSON dashboards for both roles
"""

__version__ = "1.0.0"

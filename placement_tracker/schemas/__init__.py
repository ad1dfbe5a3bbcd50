"""
Schemas module - records and API response schemas.

Everything lives in placement_tracker.schemas.schemas:
- Domain records (Student, Application, Interview, Company, User)
- Dashboard responses (StudentDashboardResponse, TPODashboardResponse, ...)
"""

# Burndown Service - Burndown projection for project dashboards
"""
Burndown Service turns a project's sprints and tasks into a day-by-day
remaining-work series (ideal vs. actual) for charting.

This service is consumed by:
- Dashboard frontend (burndown chart page)
- Any client that can hand over a sprint/task snapshot
"""

__version__ = "1.0.0"

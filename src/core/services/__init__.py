"""
Business services for the plann.er API.

- invites.py: participant invite and confirmation workflows
- trips.py: trip and participant lookups
- activities.py: activity scheduling within a trip's date range
- links.py: trip link management
"""

__all__: list[str] = []

"""
Registrations App - Youth Registration and Group Assignment

This app stores youth registrations and places every new registrant in
one of the ten youth groups of the roster.

Key Features:
- Public registration with duplicate detection
- Automatic group assignment balancing size, marital status,
  employment situation and gender
- Per-group statistics for the bureau dashboard
- Member listings for group leaders

Architecture:
- Models: YouthRegistration, roster and profile choices
- Services: group_balancing (pure), registration, group_statistics
- Views: RESTful API with a ViewSet plus a group members endpoint
"""

"""
Use Cases

Organized into domain folders:
- auth/: Login and current-user profile
- events/: Event listing, editing and review status
- regions/: Regions, lookups by code, GeoJSON
- sources/: Citation catalogue
- people/: Historical figures
- tags/: Event labels
- users/: Account administration
- audit/: Audit log writes and queries
- seed/: Bulk import

Import from subdirectories.
"""

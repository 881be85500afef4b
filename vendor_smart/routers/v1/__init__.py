"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendor_smart.py  — locations, services, jobs, vendors and vendor ranking

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_smart/services/.
"""

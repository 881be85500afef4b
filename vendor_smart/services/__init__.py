"""Services package — all business logic lives here, never in routers.

Files:
  vendor_smart.py  — locations/services listing, job & vendor registration, vendor ranking

Rule: routers call services, services call the registry, the registry checks the catalog.
      No FastAPI imports in services.
"""

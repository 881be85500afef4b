"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  catalog.py  — Location / Service response models
  job.py      — Job request DTO and response model
  vendor.py   — Vendor request DTO, response model and reachable-count response
"""

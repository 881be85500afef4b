"""In-memory job/vendor registry: the matching and consistency core.

The registry owns four mappings:

  _jobs            job id -> Job
  _jobs_by_slot    (location id, service id) -> Job, at most one job per slot
  _vendors         vendor id -> Vendor
  _job_vendors     job id -> vendor ids in registration order

Every public method takes ``_lock`` for its whole duration, so readers never
observe a vendor that is stored before its job-index entries are written.
Helpers prefixed with ``_`` assume the lock is already held.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Collection
from dataclasses import replace

from vendor_smart.core.exceptions import (
    DuplicateJobForSlot,
    DuplicateJobId,
    DuplicateVendor,
    InvalidLocationReference,
    InvalidServiceComplianceReference,
    InvalidServiceReference,
)
from vendor_smart.domain.job import Job, Slot
from vendor_smart.domain.vendor import Vendor
from vendor_smart.repositories.catalog import ReferenceCatalog

logger = logging.getLogger(__name__)

JobIdStrategy = Callable[[Collection[int]], int]


def sum_job_id(existing: Collection[int]) -> int:
    """Legacy rule: sum of existing ids, plus one when the sum is <= 1 or a single job exists."""
    total = sum(existing)
    if total <= 1 or len(existing) == 1:
        return total + 1
    return total


def sequential_job_id(existing: Collection[int]) -> int:
    return max(existing, default=0) + 1


JOB_ID_STRATEGIES: dict[str, JobIdStrategy] = {
    "sum": sum_job_id,
    "sequential": sequential_job_id,
}


class Registry:
    """Jobs, vendors and the vendor-for-job index, validated against a catalog."""

    def __init__(self, catalog: ReferenceCatalog, job_id_strategy: str = "sum"):
        if job_id_strategy not in JOB_ID_STRATEGIES:
            raise ValueError(f"Unknown job id strategy '{job_id_strategy}'")
        self._catalog = catalog
        self._next_job_id = JOB_ID_STRATEGIES[job_id_strategy]
        self._lock = threading.Lock()

        self._jobs: dict[int, Job] = {}
        self._jobs_by_slot: dict[Slot, Job] = {}
        self._vendors: dict[int, Vendor] = {}
        self._job_vendors: dict[int, list[int]] = {}

    @property
    def catalog(self) -> ReferenceCatalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def register_job(self, job: Job) -> Job:
        """Validate and store *job*, assigning an id when it has none."""
        with self._lock:
            return self._insert_job(job)

    def register_vendor(self, vendor: Vendor) -> Vendor:
        """Store *vendor* and index it under the job of every slot it declares.

        Jobs missing for the vendor's (location, service) slots are created on
        the fly. Validation runs to completion before anything is written, so
        an invalid compliance entry leaves the registry untouched.
        """
        with self._lock:
            if self._catalog.lookup_location(vendor.location_id) is None:
                raise InvalidLocationReference("Invalid location reference for this vendor")
            if vendor.id in self._vendors:
                raise DuplicateVendor(vendor.id)
            for service_id in vendor.services_compliance:
                if self._catalog.lookup_service(service_id) is None:
                    raise InvalidServiceComplianceReference(service_id)

            for service_id in vendor.services_compliance:
                job = self._find_or_create_job(Slot(vendor.location_id, service_id))
                self._job_vendors.setdefault(job.id, []).append(vendor.id)

            self._vendors[vendor.id] = vendor
            logger.info(
                "Registered vendor %s at location %s for services %s",
                vendor.id, vendor.location_id, list(vendor.services_compliance),
            )
            return vendor

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def job_for_slot(self, location_id: int, service_id: int) -> Job | None:
        with self._lock:
            return self._jobs_by_slot.get(Slot(location_id, service_id))

    def vendors_for_job(self, job_id: int) -> list[Vendor] | None:
        """Vendors indexed under *job_id*, compliant ones first.

        The ordering is a stable partition: within the compliant and the
        non-compliant groups vendors keep their registration order. Returns
        ``None`` when nothing is indexed under *job_id*, whether or not the
        job exists.
        """
        with self._lock:
            vendor_ids = self._job_vendors.get(job_id)
            if vendor_ids is None:
                return None
            service_id = self._jobs[job_id].service_id
            candidates = [self._vendors[vendor_id] for vendor_id in vendor_ids]

        compliant = [v for v in candidates if v.is_compliant(service_id)]
        others = [v for v in candidates if not v.is_compliant(service_id)]
        return compliant + others

    def reachable(self, location_id: int, service_id: int) -> int:
        """Number of vendors indexed under the job occupying the slot, 0 if none."""
        with self._lock:
            job = self._jobs_by_slot.get(Slot(location_id, service_id))
            if job is None:
                return 0
            return len(self._job_vendors.get(job.id, ()))

    def jobs(self) -> list[Job]:
        with self._lock:
            return list(self._jobs.values())

    def vendors(self) -> list[Vendor]:
        with self._lock:
            return list(self._vendors.values())

    # ------------------------------------------------------------------
    # Internal helpers (lock held)
    # ------------------------------------------------------------------

    def _find_or_create_job(self, slot: Slot) -> Job:
        job = self._jobs_by_slot.get(slot)
        if job is None:
            job = self._insert_job(Job(service_id=slot.service_id, location_id=slot.location_id))
            logger.debug("Auto-provisioned job %s for slot %s", job.id, slot)
        return job

    def _insert_job(self, job: Job) -> Job:
        if self._catalog.lookup_service(job.service_id) is None:
            raise InvalidServiceReference()
        if self._catalog.lookup_location(job.location_id) is None:
            raise InvalidLocationReference()
        existing = self._jobs_by_slot.get(job.slot)
        if existing is not None:
            raise DuplicateJobForSlot(existing.id)

        if job.id is None:
            job = replace(job, id=self._assign_job_id())
        elif job.id in self._jobs:
            raise DuplicateJobId(job.id)

        self._jobs[job.id] = job
        self._jobs_by_slot[job.slot] = job
        logger.info(
            "Registered job %s (location %s, service %s)",
            job.id, job.location_id, job.service_id,
        )
        return job

    def _assign_job_id(self) -> int:
        existing = self._jobs.keys()
        candidate = self._next_job_id(existing)
        if candidate in self._jobs:
            fallback = sequential_job_id(existing)
            logger.warning(
                "Job id %s already taken, assigning %s instead", candidate, fallback,
            )
            return fallback
        return candidate

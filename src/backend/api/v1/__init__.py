"""
API v1 router aggregating all endpoints.
"""

from fastapi import APIRouter

from api.v1.admin import router as admin_router
from api.v1.audit import router as audit_router
from api.v1.candidates import router as candidates_router
from api.v1.elections import router as elections_router
from api.v1.stats import router as stats_router
from api.v1.voters import router as voters_router
from api.v1.votes import router as votes_router

router = APIRouter()

router.include_router(elections_router, prefix="/elections", tags=["Elections"])
router.include_router(candidates_router, prefix="/candidates", tags=["Candidates"])
router.include_router(voters_router, prefix="/voters", tags=["Voters"])
router.include_router(votes_router, prefix="/votes", tags=["Votes"])
router.include_router(stats_router, prefix="/stats", tags=["Voting Statistics"])
router.include_router(admin_router, tags=["Administration"])
router.include_router(audit_router, prefix="/audit", tags=["Audit"])

"""Schemas module initialization."""

from schemas.admin import AuthorityResponse, AuthorityTransfer, RegistrarCreate, RegistrarList
from schemas.audit import AuditEvent, AuditEventPage
from schemas.candidate import Candidate, CandidateCreate, CandidateIdList
from schemas.election import Election, ElectionCreate, ElectionResults, TallyResponse
from schemas.stats import VotingStatsResponse
from schemas.voter import VoteCreate, VoteResponse, VoterCreate, VoterStatus

__all__ = [
    "AuthorityResponse",
    "AuthorityTransfer",
    "RegistrarCreate",
    "RegistrarList",
    "AuditEvent",
    "AuditEventPage",
    "Candidate",
    "CandidateCreate",
    "CandidateIdList",
    "Election",
    "ElectionCreate",
    "ElectionResults",
    "TallyResponse",
    "VotingStatsResponse",
    "VoteCreate",
    "VoteResponse",
    "VoterCreate",
    "VoterStatus",
]

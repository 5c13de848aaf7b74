"""Repository modules for election state access."""

from repositories.candidate_repository import CandidateRepository
from repositories.registrar_repository import RegistrarRepository
from repositories.voter_repository import VoterRepository

__all__ = [
    "CandidateRepository",
    "RegistrarRepository",
    "VoterRepository",
]

"""
Schema converter functions.

Centralized helpers for converting domain dataclasses to Pydantic schemas.
These are the single source of truth for model-to-schema conversions.
"""

from typing import TYPE_CHECKING

from schemas.audit import AuditEvent
from schemas.candidate import Candidate
from schemas.election import (
    CandidateResult,
    Election,
    ElectionResults,
    LifecycleStateEnum,
    TallyResponse,
)
from schemas.voter import VoterStatus

if TYPE_CHECKING:
    from models.candidate import Candidate as CandidateModel
    from models.election import Election as ElectionModel
    from models.election import LifecycleState
    from models.event import ElectionEvent
    from models.voter import Voter
    from services.election_service import ElectionResults as ElectionResultsModel
    from services.tally import TallyResult


def election_model_to_schema(election: "ElectionModel", state: "LifecycleState") -> Election:
    """Convert the election record plus its derived lifecycle state."""
    return Election(
        title=election.title,
        description=election.description,
        start_time=election.start_time,
        end_time=election.end_time,
        is_active=election.is_active,
        results_published=election.results_published,
        candidate_ids=list(election.candidate_ids),
        total_votes=election.total_votes,
        winner_candidate_id=election.winner_candidate_id,
        generation=election.generation,
        state=LifecycleStateEnum(state.value),
    )


def candidate_model_to_schema(candidate: "CandidateModel") -> Candidate:
    return Candidate.model_validate(candidate)


def voter_model_to_schema(principal: str, voter: "Voter") -> VoterStatus:
    return VoterStatus(
        principal=principal,
        is_registered=voter.is_registered,
        has_voted=voter.has_voted,
        voted_candidate_id=voter.voted_candidate_id,
        registration_time=voter.registration_time,
    )


def tally_to_schema(tally: "TallyResult") -> TallyResponse:
    return TallyResponse(
        winner_candidate_id=tally.winner_candidate_id,
        winner_name=tally.winner_name,
        winner_votes=tally.winner_votes,
        total_votes=tally.total_votes,
    )


def results_to_schema(results: "ElectionResultsModel") -> ElectionResults:
    """
    Convert published results, including per-candidate tallies.

    A zero-vote election reports candidate 0 as winner even when no such
    candidate exists; winner_name is then empty.
    """
    return ElectionResults(
        title=results.title,
        winner_candidate_id=results.winner_candidate_id,
        winner_name=results.winner_name,
        winner_votes=results.winner_votes,
        total_votes=results.total_votes,
        candidates=[
            CandidateResult(
                candidate_id=c.id,
                name=c.name,
                party=c.party,
                vote_count=c.vote_count,
            )
            for c in results.candidates
        ],
    )


def event_to_schema(event: "ElectionEvent") -> AuditEvent:
    return AuditEvent(
        sequence=event.sequence,
        event_type=event.event_type.value,
        occurred_at=event.occurred_at,
        generation=event.generation,
        actor=event.actor,
        payload=dict(event.payload),
    )

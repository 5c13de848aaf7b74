"""
Election lifecycle controller and vote tally engine.

ElectionService owns the single ElectionLedgerState and is the only thing
allowed to change it. Every operation runs under one re-entrant lock and
checks all of its preconditions before the first write, so a rejected call
never leaves partial state and two concurrent votes by the same principal
cannot both pass the "not yet voted" check.

Lifecycle:
    no_election -> pre_voting -> voting -> closed -> published
with an emergency pause that can be lifted while the window is still open.
"""

import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Optional

import structlog

from core.clock import Clock, SystemClock
from core.config import settings
from core.exceptions import (
    AlreadyRegistered,
    AlreadyVoted,
    ElectionNotInVotingPeriod,
    InvalidCandidate,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    TimingViolationError,
    VoterNotRegistered,
)
from core.security import is_null_principal, normalize_principal
from models.authorization import AuthorizationSet
from models.candidate import Candidate
from models.election import Election, LifecycleState
from models.event import ElectionEvent, ElectionEventType, serialize_time
from models.ledger import ElectionLedgerState
from models.voter import Voter
from repositories.candidate_repository import CandidateRepository
from repositories.registrar_repository import RegistrarRepository
from repositories.voter_repository import VoterRepository
from services.access_control import require_authority, require_registrar
from services.audit_log import AuditLog
from services.stats_service import StatsService, VotingStats
from services.tally import TallyResult, compute_winner

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ElectionResults:
    """Published outcome of an election."""

    title: str
    winner_candidate_id: int
    winner_name: str
    winner_votes: int
    total_votes: int
    candidates: tuple[Candidate, ...]


class ElectionService:
    """Controller for the one election managed by this process."""

    def __init__(
        self,
        authority: str,
        clock: Optional[Clock] = None,
        audit_log: Optional[AuditLog] = None,
    ):
        authority = normalize_principal(authority)
        if is_null_principal(authority):
            raise InvalidInputError("Election authority must not be the null principal")

        self.clock = clock or SystemClock()
        self.audit_log = audit_log or AuditLog()
        self._state = ElectionLedgerState(authorization=AuthorizationSet(authority=authority))
        self._lock = threading.RLock()

        self.candidates = CandidateRepository(self._state)
        self.voters = VoterRepository(self._state)
        self.registrars = RegistrarRepository(self._state)

    # =========================================================================
    # Authority & registrars
    # =========================================================================

    def add_registrar(self, caller: str, principal: str) -> bool:
        """Authorize a principal to enroll voters."""
        caller = normalize_principal(caller)
        principal = normalize_principal(principal)
        with self._lock:
            require_authority(self.registrars, caller, "add registrars")
            if is_null_principal(principal):
                raise InvalidInputError("Registrar must not be the null principal")

            added = self.registrars.add(principal)
            self._emit(ElectionEventType.REGISTRAR_ADDED, caller, registrar=principal)
            return added

    def remove_registrar(self, caller: str, principal: str) -> bool:
        """Revoke a registrar. The authority itself cannot be removed."""
        caller = normalize_principal(caller)
        principal = normalize_principal(principal)
        with self._lock:
            require_authority(self.registrars, caller, "remove registrars")
            if self.registrars.is_authority(principal):
                raise InvalidInputError("Cannot remove the election authority as registrar")

            removed = self.registrars.remove(principal)
            self._emit(ElectionEventType.REGISTRAR_REMOVED, caller, registrar=principal)
            return removed

    def transfer_authority(self, caller: str, new_authority: str) -> str:
        """Hand full administrative control to another principal."""
        caller = normalize_principal(caller)
        new_authority = normalize_principal(new_authority)
        with self._lock:
            require_authority(self.registrars, caller, "transfer authority")
            if is_null_principal(new_authority):
                raise InvalidInputError("New authority must not be the null principal")

            previous = self.registrars.set_authority(new_authority)
            self._emit(
                ElectionEventType.AUTHORITY_TRANSFERRED,
                caller,
                previous_authority=previous,
                new_authority=new_authority,
            )
            return previous

    def get_authority(self) -> str:
        with self._lock:
            return self.registrars.authority

    def get_registrars(self) -> list[str]:
        with self._lock:
            return self.registrars.list_registrars()

    def is_registrar(self, principal: str) -> bool:
        with self._lock:
            return self.registrars.is_registrar(normalize_principal(principal))

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def create_election(
        self,
        caller: str,
        title: str,
        description: str,
        duration_hours: int,
    ) -> Election:
        """
        Start a new election generation.

        Allowed when no election is active or the active one's window has
        elapsed. Clears the previous candidate set and resets the candidate
        and vote counters; voter records are kept.
        """
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "create an election")
            now = self.clock.now()
            current = self._state.election
            if current.is_active and current.end_time is not None and now <= current.end_time:
                raise InvalidStateError("An election is already active")

            title = (title or "").strip()
            if not title:
                raise InvalidInputError("Election title must not be empty")
            if isinstance(duration_hours, bool) or not isinstance(duration_hours, int):
                raise InvalidInputError("Election duration must be a whole number of hours")
            if duration_hours <= 0:
                raise InvalidInputError("Election duration must be positive")

            cleared = self.candidates.clear_generation()
            self._state.total_votes_cast = 0
            self._state.election = Election(
                title=title,
                description=description or "",
                start_time=now,
                end_time=now + timedelta(hours=duration_hours),
                is_active=True,
                results_published=False,
                candidate_ids=[],
                total_votes=0,
                winner_candidate_id=0,
                is_tallied=False,
                generation=current.generation + 1,
            )
            election = self._state.election

            self._emit(
                ElectionEventType.ELECTION_CREATED,
                caller,
                now=now,
                title=election.title,
                start_time=serialize_time(election.start_time),
                end_time=serialize_time(election.end_time),
                duration_hours=duration_hours,
                cleared_candidates=cleared,
            )
            return self._election_snapshot()

    def emergency_pause(self, caller: str) -> Election:
        """Administrative kill-switch: stop voting without touching tallies."""
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "pause the election")
            was_active = self._state.election.is_active
            self._state.election.is_active = False

            self._emit(ElectionEventType.ELECTION_PAUSED, caller, was_active=was_active)
            return self._election_snapshot()

    def emergency_resume(self, caller: str) -> Election:
        """Lift an emergency pause while the voting window is still open."""
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "resume the election")
            election = self._state.election
            if not election.exists:
                raise InvalidStateError("No election has been created")
            if election.is_tallied:
                raise InvalidStateError("Election has already been ended")
            now = self.clock.now()
            if now > election.end_time:
                raise TimingViolationError("Voting window has already elapsed")

            election.is_active = True
            self._emit(ElectionEventType.ELECTION_RESUMED, caller, now=now)
            return self._election_snapshot()

    def end_election(self, caller: str) -> TallyResult:
        """Close the election once its window has elapsed and compute the winner."""
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "end the election")
            election = self._state.election
            if not election.is_active:
                raise InvalidStateError("Election is not active")
            now = self.clock.now()
            if now < election.end_time:
                raise TimingViolationError("Election window has not elapsed yet")

            election.is_active = False
            tally = compute_winner(election.candidate_ids, self._state.candidates)
            election.winner_candidate_id = tally.winner_candidate_id
            election.is_tallied = True

            self._emit(
                ElectionEventType.ELECTION_ENDED,
                caller,
                now=now,
                total_votes=election.total_votes,
                winner_candidate_id=tally.winner_candidate_id,
                winner_name=tally.winner_name,
            )
            return tally

    def publish_results(self, caller: str) -> ElectionResults:
        """Expose the computed results through the query layer."""
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "publish results")
            election = self._state.election
            if election.is_active:
                raise InvalidStateError("Election is still active")
            if election.results_published:
                raise InvalidStateError("Results have already been published")
            if not election.is_tallied:
                raise InvalidStateError("Election has not been ended and tallied")

            election.results_published = True
            results = self._results_snapshot()
            self._emit(
                ElectionEventType.RESULTS_PUBLISHED,
                caller,
                winner_candidate_id=results.winner_candidate_id,
                winner_votes=results.winner_votes,
            )
            return results

    # =========================================================================
    # Candidates & voters
    # =========================================================================

    def register_candidate(
        self,
        caller: str,
        name: str,
        party: str,
        manifesto: str,
    ) -> Candidate:
        """Enroll a candidate; only valid up to the opening of the voting window."""
        caller = normalize_principal(caller)
        with self._lock:
            require_authority(self.registrars, caller, "register candidates")
            election = self._state.election
            if not election.is_active:
                raise InvalidStateError("No active election to register candidates for")
            now = self.clock.now()
            if now > election.start_time:
                raise TimingViolationError("Candidate registration closes when voting opens")
            name = (name or "").strip()
            if not name:
                raise InvalidInputError("Candidate name must not be empty")

            candidate = self.candidates.create(name=name, party=party or "", manifesto=manifesto or "")
            self._emit(
                ElectionEventType.CANDIDATE_REGISTERED,
                caller,
                now=now,
                candidate_id=candidate.id,
                name=candidate.name,
                party=candidate.party,
            )
            return replace(candidate)

    def register_voter(self, caller: str, principal: str) -> Voter:
        """Enroll a voter. Registration is permanent."""
        caller = normalize_principal(caller)
        principal = normalize_principal(principal)
        with self._lock:
            require_registrar(self.registrars, caller, "register voters")
            if is_null_principal(principal):
                raise InvalidInputError("Voter must not be the null principal")
            if self.voters.is_registered(principal):
                raise AlreadyRegistered()

            now = self.clock.now()
            voter = self.voters.register(principal, registered_at=now)
            self._emit(
                ElectionEventType.VOTER_REGISTERED,
                caller,
                now=now,
                voter=principal,
                registrar=caller,
                registration_time=serialize_time(now),
            )
            return replace(voter)

    def cast_vote(self, caller: str, candidate_id: int) -> Voter:
        """
        Record the caller's vote.

        Checks, in order: caller registered, election active and inside the
        window, caller has not voted, candidate valid and active. Then applies
        the voter, candidate and counter updates together.
        """
        caller = normalize_principal(caller)
        with self._lock:
            if not self.voters.is_registered(caller):
                raise VoterNotRegistered()
            election = self._state.election
            now = self.clock.now()
            if not election.is_active or not election.window_contains(now):
                raise ElectionNotInVotingPeriod()
            if self.voters.has_voted(caller):
                raise AlreadyVoted()
            if isinstance(candidate_id, bool) or not isinstance(candidate_id, int):
                raise InvalidCandidate("Candidate id must be an integer")
            candidate = self.candidates.get_by_id(candidate_id)
            if candidate is None:
                raise InvalidCandidate(f"Candidate {candidate_id} does not exist")
            if not candidate.is_active:
                raise InvalidCandidate(f"Candidate {candidate_id} is not active")

            voter = self.voters.mark_voted(caller, candidate_id)
            self.candidates.increment_vote_count(candidate_id)
            election.total_votes += 1
            self._state.total_votes_cast += 1

            self._emit(
                ElectionEventType.VOTE_CAST,
                caller,
                now=now,
                voter=caller,
                candidate_id=candidate_id,
                cast_at=serialize_time(now),
            )
            return replace(voter)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_election_details(self) -> Election:
        with self._lock:
            return self._election_snapshot()

    def get_lifecycle_state(self) -> LifecycleState:
        with self._lock:
            return self._state.election.lifecycle_state(self.clock.now())

    def get_candidate_details(self, candidate_id: int) -> Candidate:
        with self._lock:
            candidate = self.candidates.snapshot(candidate_id)
            if candidate is None:
                raise NotFoundError(f"Candidate {candidate_id} not found")
            return candidate

    def get_voter_status(self, principal: str) -> Voter:
        with self._lock:
            return self.voters.snapshot(normalize_principal(principal))

    def get_election_results(self) -> ElectionResults:
        with self._lock:
            election = self._state.election
            if election.is_active or not election.results_published:
                raise InvalidStateError("Results have not been published")
            return self._results_snapshot()

    def get_all_candidates(self) -> list[int]:
        with self._lock:
            return self.candidates.list_ids()

    def list_candidates(self) -> list[Candidate]:
        """Detached copies of every candidate, in registration order."""
        with self._lock:
            return [replace(c) for c in self.candidates.list_all()]

    def get_voting_stats(self) -> VotingStats:
        with self._lock:
            return StatsService(self._state).get_stats()

    def list_events(
        self,
        since_sequence: int = 0,
        event_type: Optional[ElectionEventType] = None,
        limit: Optional[int] = None,
    ) -> list[ElectionEvent]:
        return self.audit_log.list_events(since_sequence=since_sequence, event_type=event_type, limit=limit)

    # =========================================================================
    # Internals
    # =========================================================================

    def _election_snapshot(self) -> Election:
        election = self._state.election
        return replace(election, candidate_ids=list(election.candidate_ids))

    def _results_snapshot(self) -> ElectionResults:
        election = self._state.election
        winner = self._state.candidates.get(election.winner_candidate_id)
        return ElectionResults(
            title=election.title,
            winner_candidate_id=election.winner_candidate_id,
            winner_name=winner.name if winner else "",
            winner_votes=winner.vote_count if winner else 0,
            total_votes=election.total_votes,
            candidates=tuple(replace(c) for c in self.candidates.list_all()),
        )

    def _emit(
        self,
        event_type: ElectionEventType,
        actor: str,
        now: Optional[datetime] = None,
        **payload: object,
    ) -> ElectionEvent:
        return self.audit_log.record(
            event_type,
            occurred_at=now or self.clock.now(),
            generation=self._state.election.generation,
            actor=actor,
            **payload,
        )


@lru_cache
def get_election_service() -> ElectionService:
    """Get the process-wide election service."""
    logger.info("election_service_initialized", authority=settings.ELECTION_AUTHORITY)
    return ElectionService(authority=settings.ELECTION_AUTHORITY)

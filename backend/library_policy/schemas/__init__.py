"""
Schemas Pydantic da aplicação.
"""

from library_policy.schemas.base import BaseSchema, Decision, ValueRecord
from library_policy.schemas.book import BookImportRow, BookRecord, ImportRequest, ImportResult
from library_policy.schemas.fee import FeeStructure
from library_policy.schemas.health import HealthResponse
from library_policy.schemas.loan import (
    CheckoutEligibilityRequest,
    CheckoutOutcome,
    FineCalculationRequest,
    FineCalculationResponse,
    LoanIssueRequest,
    LoanLostRequest,
    LoanRecord,
    LoanRenewRequest,
    LoanReturnRequest,
    LostOutcome,
    RenewalEligibilityRequest,
    RenewalOutcome,
    ReturnOutcome,
)
from library_policy.schemas.member import MemberProfile, MembershipStatus, MembershipStatusRequest
from library_policy.schemas.policy import RolePolicies, RolePolicy
from library_policy.schemas.reservation import Reservation
from library_policy.schemas.search import SearchResults

__all__ = [
    # Base
    "BaseSchema",
    "Decision",
    "ValueRecord",
    # Health
    "HealthResponse",
    # Book
    "BookImportRow",
    "BookRecord",
    "ImportRequest",
    "ImportResult",
    # Fee
    "FeeStructure",
    # Loan
    "CheckoutEligibilityRequest",
    "CheckoutOutcome",
    "FineCalculationRequest",
    "FineCalculationResponse",
    "LoanIssueRequest",
    "LoanLostRequest",
    "LoanRecord",
    "LoanRenewRequest",
    "LoanReturnRequest",
    "LostOutcome",
    "RenewalEligibilityRequest",
    "RenewalOutcome",
    "ReturnOutcome",
    # Member
    "MemberProfile",
    "MembershipStatus",
    "MembershipStatusRequest",
    # Policy
    "RolePolicies",
    "RolePolicy",
    # Reservation
    "Reservation",
    # Search
    "SearchResults",
]

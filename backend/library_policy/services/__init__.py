"""
Módulo de serviços - regras de circulação, multas e importação.
"""

from library_policy.services.checkout import can_checkout, check_checkout, has_overdue_loan
from library_policy.services.circulation import CirculationService
from library_policy.services.fines import (
    calculate_fee,
    calculate_fine,
    get_days_late,
    get_days_until_due,
    get_due_date,
    is_overdue,
)
from library_policy.services.importer import (
    convert_row_to_book,
    import_books_csv,
    parse_csv,
    process_import_data,
    validate_import_row,
)
from library_policy.services.membership import (
    format_expiry_date,
    get_days_until_expiry,
    get_expiry_warning_level,
    get_membership_status,
    is_membership_expired,
)
from library_policy.services.policy import DEFAULT_ROLE_POLICIES, RolePolicyStore, get_policy_store
from library_policy.services.renewal import can_renew, check_renewal, has_pending_holds, renewal_decision
from library_policy.services.search import perform_search

__all__ = [
    # Fines
    "calculate_fee",
    "calculate_fine",
    "get_days_late",
    "get_days_until_due",
    "get_due_date",
    "is_overdue",
    # Policy
    "DEFAULT_ROLE_POLICIES",
    "RolePolicyStore",
    "get_policy_store",
    # Checkout / renewal
    "can_checkout",
    "check_checkout",
    "has_overdue_loan",
    "can_renew",
    "check_renewal",
    "has_pending_holds",
    "renewal_decision",
    # Membership
    "format_expiry_date",
    "get_days_until_expiry",
    "get_expiry_warning_level",
    "get_membership_status",
    "is_membership_expired",
    # Import
    "convert_row_to_book",
    "import_books_csv",
    "parse_csv",
    "process_import_data",
    "validate_import_row",
    # Workflow
    "CirculationService",
    "perform_search",
]
